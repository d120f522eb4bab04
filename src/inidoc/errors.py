# -*- encoding: utf-8 -*-
# @File   : errors.py
# @Time   : 2026/10/18 10:05:12
# @Author : Kariko Lin


class IniError(Exception):
    """Base of everything raised by `inidoc`."""
    pass


class InvalidIdentifier(IniError, ValueError):
    """Section or key name doesn't pass `naming.is_valid()`."""
    def __init__(self, name: object, kind: str = 'name') -> None:
        super().__init__(f'{name!r} is not a valid {kind}.')
        self.name = name


class _LineError(IniError, ValueError):
    def __init__(
        self, msg: str,
        lineno: int | None = None, line: str | None = None
    ) -> None:
        if lineno is not None:
            msg = f'line {lineno}: {msg}'
        super().__init__(msg)
        self.lineno = lineno
        self.line = line


class IniSyntaxError(_LineError):
    """A line is neither a section header nor a key line
    (or not the one expected)."""
    pass


class EmptySection(_LineError):
    """A new section header found while the current one has no keys."""
    pass


class DuplicateName(IniError, KeyError):
    """Adding (without `replace`) a section or key which already exists."""
    def __init__(self, name: str, kind: str = 'name') -> None:
        super().__init__(f'{kind} "{name}" already exists.')
        self.name = name

    # KeyError would repr() the message otherwise.
    def __str__(self) -> str:
        return str(self.args[0])


class FormatError(IniError, ValueError):
    """Value text doesn't match the grammar of the requested type."""
    pass


class RangeError(IniError, OverflowError):
    """Value is well-formed but out of range of the requested type."""
    pass
