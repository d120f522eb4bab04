# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2026/10/18 10:20:57
# @Author : Kariko Lin

"""
Basically INI Structure: a document of sections, a section of keys.

```ini
[SectionName]
keyName = keyValue
anotherKey = anotherValue

[NextSection]
...
```

All names (of sections or keys) must pass `naming.is_valid()`.
Both levels keep their insertion order, which is also the writing order.

As for reading & writing files, just see `ini.parser`.
"""

import math
import re
import struct
from collections.abc import Iterable, Iterator, MutableMapping

from ..diagnostics import DiagnosticSink
from ..errors import (
    DuplicateName,
    FormatError,
    IniSyntaxError,
    InvalidIdentifier,
    RangeError
)
from ..naming import is_valid

_INT_GRAMMAR = re.compile(r'\s*[+-]?[0-9]+\s*')
_FLOAT_GRAMMAR = re.compile(
    r'\s*[+-]?(?:'
    r'(?P<num>(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)'
    r'|inf(?:inity)?|nan)\s*',
    re.IGNORECASE)

# (min, max) by (bits, signed)
_INT_RANGES = {
    (bits, signed): (
        (-(1 << (bits - 1)), (1 << (bits - 1)) - 1) if signed
        else (0, (1 << bits) - 1)
    )
    for bits in (8, 16, 32, 64) for signed in (True, False)
}


def _parse_int(text: str, bits: int, signed: bool) -> int:
    if not _INT_GRAMMAR.fullmatch(text):
        raise FormatError(f'{text!r} is not an integer.')
    val = int(text)
    lo, hi = _INT_RANGES[bits, signed]
    if not lo <= val <= hi:
        raise RangeError(
            f'{val} is out of range of '
            f'{"" if signed else "u"}int{bits} [{lo}, {hi}].')
    return val


def _parse_float(text: str, single: bool) -> float:
    if not (m := _FLOAT_GRAMMAR.fullmatch(text)):
        raise FormatError(f'{text!r} is not a floating point number.')
    val = float(text)
    # only the digits could overflow; "inf" is inf by itself.
    if m['num'] is not None and math.isinf(val):
        raise RangeError(f'{text.strip()} is out of range of float64.')
    if single:
        try:
            val = struct.unpack('<f', struct.pack('<f', val))[0]
        except OverflowError as e:
            raise RangeError(
                f'{text.strip()} is out of range of float32.') from e
    return val


class Key:
    """A `name = value` pair.

    Construction never fails: an invalid `name` is stored as `''`,
    and a missing `value` as `''` as well.
    Assigning an invalid name afterwards raises `InvalidIdentifier` though.
    """

    def __init__(self, name: str | None = None, value: str | None = None):
        self.__name = name if is_valid(name) else ''
        self.value = value

    @property
    def name(self) -> str:
        return self.__name

    @name.setter
    def name(self, name: str) -> None:
        if not is_valid(name):
            raise InvalidIdentifier(name, 'key name')
        self.__name = name

    def set_name(self, name: str) -> None:
        self.name = name

    @property
    def value(self) -> str:
        return self.__value

    @value.setter
    def value(self, value: str | None) -> None:
        self.__value = '' if value is None else str(value)

    @classmethod
    def parse_line(cls, line: str) -> 'Key':
        """Parse `name = value`, split at the *first* `=`.

        Both sides are trimmed, and the value may be empty.

        Raises:
            IniSyntaxError: no `=` in the line.
            InvalidIdentifier: left side isn't a valid name.
        """
        if not line or '=' not in line:
            raise IniSyntaxError(f'{line!r} is not a key line.', line=line)
        name, value = line.strip().split('=', 1)
        ret = cls()
        ret.name = name.strip()
        ret.value = value.strip()
        return ret

    @classmethod
    def from_line(cls, line: str) -> 'Key | None':
        """Same as `parse_line()`, but `None` instead of raising."""
        try:
            return cls.parse_line(line)
        except (IniSyntaxError, InvalidIdentifier):
            return None

    def to_int64(self) -> int:
        return _parse_int(self.value, 64, True)

    def to_uint64(self) -> int:
        return _parse_int(self.value, 64, False)

    def to_int32(self) -> int:
        return _parse_int(self.value, 32, True)

    def to_uint32(self) -> int:
        return _parse_int(self.value, 32, False)

    def to_int16(self) -> int:
        return _parse_int(self.value, 16, True)

    def to_uint16(self) -> int:
        return _parse_int(self.value, 16, False)

    def to_int8(self) -> int:
        return _parse_int(self.value, 8, True)

    def to_uint8(self) -> int:
        return _parse_int(self.value, 8, False)

    def to_float32(self) -> float:
        """Parse as float, rounded to single precision."""
        return _parse_float(self.value, True)

    def to_float64(self) -> float:
        return _parse_float(self.value, False)

    def to_bool(self) -> bool:
        """`true` / `false` (case insensitive),
        otherwise any int32 where non-zero means `True`."""
        match self.value.lower():
            case 'true':
                return True
            case 'false':
                return False
        try:
            return self.to_int32() != 0
        except (FormatError, RangeError) as e:
            raise FormatError(
                f'{self.value!r} is neither a boolean '
                'nor an integer to be cast into boolean.') from e

    def serialize(self) -> str:
        return f'{self.name} = {self.value}'

    def __str__(self) -> str:
        return self.serialize()

    def __repr__(self) -> str:
        return f'Key({self.name!r}, {self.value!r})'

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Key):
            return NotImplemented
        return self.name == other.name and self.value == other.value


class Section(MutableMapping[str, Key]):
    """An ordered dict of keys, indexed by their names.

    A section may be constructed without a (valid) name, in which case
    `name` is `None`. Such a section can't be added into a `Document`.
    """

    def __init__(self, name: str | None = None) -> None:
        self.__name = name if is_valid(name) else None
        self.__keys: dict[str, Key] = {}

    @property
    def name(self) -> str | None:
        return self.__name

    @name.setter
    def name(self, name: str) -> None:
        if not is_valid(name):
            raise InvalidIdentifier(name, 'section name')
        self.__name = name

    def set_name(self, name: str) -> None:
        self.name = name

    @property
    def empty(self) -> bool:
        return not self.__keys

    def __getitem__(self, name: str) -> Key:
        return self.__keys[name]

    def __setitem__(self, name: str, key: Key) -> None:
        if not isinstance(key, Key) or key.name != name:
            raise ValueError(f'Unable to add key as "{name}" to section.')
        self.add(key, replace=True)

    def __delitem__(self, name: str) -> None:
        del self.__keys[name]

    def __contains__(self, name: object) -> bool:
        return name in self.__keys

    def __iter__(self) -> Iterator[str]:
        return iter(self.__keys)

    def __len__(self) -> int:
        return len(self.__keys)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Section):
            return NotImplemented
        return self.name == other.name and self.__keys == other.__keys

    def __repr__(self) -> str:
        return '[%s] { .cnt = %d }' % (self.name, len(self))

    def __str__(self) -> str:
        return self.serialize()

    def contains(self, name: str) -> bool:
        return name in self.__keys

    def get(self, name: str, default: Key | None = None) -> Key | None:
        return self.__keys.get(name, default)

    def add(self, key: Key, replace: bool = False) -> None:
        """Append `key`.

        If a key of the same name exists, it's overwritten *in place*
        (keeps its position) when `replace`, otherwise `DuplicateName`.
        """
        if key is None or not is_valid(key.name):
            raise InvalidIdentifier(
                None if key is None else key.name, 'key name')
        if key.name in self.__keys and not replace:
            raise DuplicateName(key.name, 'key')
        self.__keys[key.name] = key

    def remove(self, name: str) -> bool:
        return self.__keys.pop(name, None) is not None

    def clear(self) -> None:
        self.__keys.clear()

    def parse_name_line(self, line: str) -> None:
        """Take the name from a `[name]` line.

        Spaces inside the brackets are trimmed, like `[ name ]`.
        """
        handle = line.strip() if line else ''
        if len(handle) < 3 or handle[0] != '[' or handle[-1] != ']':
            raise IniSyntaxError(
                f'{line!r} is not a section header.', line=line)
        self.name = handle[1:-1].strip()

    def parse_key_line(self, line: str, replace: bool = False) -> None:
        self.add(Key.parse_line(line), replace)

    @classmethod
    def from_line(cls, line: str) -> 'Section | None':
        """A new section named by a `[name]` line,
        or `None` if the line isn't one."""
        ret = cls()
        try:
            ret.parse_name_line(line)
        except (IniSyntaxError, InvalidIdentifier):
            return None
        return ret

    def serialize(self) -> str:
        # write values as is, no more trimming through `Key`.
        ret = f'[{self.name or ""}]'
        for k, v in self.__keys.items():
            ret += f'\n{k} = {v.value}'
        return ret


class Document(MutableMapping[str, Section]):
    """INI 文档：按名称索引、保持插入顺序的小节字典。

    Missing lookups via `get()` give `None`;
    `document[name]` raises `KeyError` as a dict does.
    """

    def __init__(self) -> None:
        self.__sections: dict[str, Section] = {}

    @property
    def empty(self) -> bool:
        return not self.__sections

    def __getitem__(self, name: str) -> Section:
        return self.__sections[name]

    def __setitem__(self, name: str, section: Section) -> None:
        if not isinstance(section, Section) or section.name != name:
            raise ValueError(
                f'Unable to add section as "{name}" to document.')
        self.add(section, replace=True)

    def __delitem__(self, name: str) -> None:
        del self.__sections[name]

    def __contains__(self, name: object) -> bool:
        return name in self.__sections

    def __iter__(self) -> Iterator[str]:
        return iter(self.__sections)

    def __len__(self) -> int:
        return len(self.__sections)

    def __repr__(self) -> str:
        return f'Document({list(self.__sections)!r})'

    def __str__(self) -> str:
        return self.serialize()

    def contains(self, section: str, key: str | None = None) -> bool:
        if section not in self.__sections:
            return False
        return key is None or key in self.__sections[section]

    def get(
        self, section: str, key: str | None = None
    ) -> Section | Key | None:
        """`get(section)` for a section, `get(section, key)` for a key.
        `None` if not found."""
        sect = self.__sections.get(section)
        if sect is None or key is None:
            return sect
        return sect.get(key)

    def add(self, section: Section, replace: bool = False) -> None:
        """Same as `Section.add()`, but for sections.

        Unnamed sections are refused with `InvalidIdentifier`.
        """
        if section is None or not is_valid(section.name):
            raise InvalidIdentifier(
                None if section is None else section.name, 'section name')
        if section.name in self.__sections and not replace:
            raise DuplicateName(section.name, 'section')
        self.__sections[section.name] = section

    def add_key(
        self, section: str, key: Key,
        create: bool = True, replace: bool = False
    ) -> None:
        """Add `key` into the section named `section`.

        The section will be created if missing and `create`,
        otherwise `KeyError`.
        """
        if key is None or not is_valid(key.name):
            raise InvalidIdentifier(
                None if key is None else key.name, 'key name')
        if not is_valid(section):
            raise InvalidIdentifier(section, 'section name')
        if section not in self.__sections:
            if not create:
                raise KeyError(section)
            self.add(Section(section))
        self.__sections[section].add(key, replace)

    def remove(self, section: str, key: str | None = None) -> bool:
        if key is None:
            return self.__sections.pop(section, None) is not None
        if section not in self.__sections:
            return False
        return self.__sections[section].remove(key)

    def clear(self) -> None:
        self.__sections.clear()

    def _merge(self, sections: Iterable[Section]) -> None:
        """Publish sections that a parse fully staged, for `ini.parser`."""
        for i in sections:
            self.__sections[i.name] = i

    def load_from_lines(
        self, lines: Iterable[str], sink: DiagnosticSink | None = None
    ) -> None:
        """Parse lines into this document, all or nothing.

        Parsed sections are appended to the existing ones;
        on any error the document is left as it was.
        """
        # parser imports this module.
        from .parser import IniParser
        IniParser.readlines(lines, self, sink)

    def load_from_string(
        self, text: str, sink: DiagnosticSink | None = None
    ) -> None:
        from .parser import IniParser
        IniParser.readstring(text, self, sink)

    def load_from_file(
        self, path: str,
        encoding: str | None = None,
        sink: DiagnosticSink | None = None
    ) -> None:
        from .parser import IniParser
        IniParser(path, encoding).read(sink, self)

    def serialize(self) -> str:
        # a blank line after each section.
        return ''.join(
            f'{i.serialize()}\n\n' for i in self.__sections.values())
