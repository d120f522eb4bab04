# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2026/10/18 11:02:19
# @Author : Kariko Lin

"""Line driven INI reading, and writing back.

Every line must be one of:
1. blank, or a comment starting with `#` or `;` (skipped anywhere);
2. a section header `[name]`;
3. a key line `name = value` (only after the first section header).

Reading is *all or nothing*: the first bad line aborts the whole load,
and the target `Document` stays untouched. Besides,
- a section must have at least one key before the next header comes
  (the last section is taken as is);
- section names are unique in a document, so are key names in a section.
"""

import logging
from collections.abc import Iterable
from warnings import warn

import chardet

from ..abstract import FileHandler
from ..diagnostics import DiagnosticSink, NullSink
from ..errors import DuplicateName, EmptySection, IniError, IniSyntaxError
from .model import Document, Key, Section


def _split_lines(text: str) -> list[str]:
    return text.replace('\r\n', '\n').replace('\r', '\n').split('\n')


def _is_skipped(line: str) -> bool:
    handle = line.strip()
    return not handle or handle[0] in '#;'


class IniParser(FileHandler[Document]):
    def __init__(self, filename: str, encoding: str | None = None) -> None:
        super().__init__(filename)
        self._codec = encoding

    @staticmethod
    def readlines(
        lines: Iterable[str],
        ins: Document | None = None,
        sink: DiagnosticSink | None = None
    ) -> Document:
        """读取（已经拆好行的）INI 文本。

        Sections parsed are appended to `ins` (or a new `Document`)
        only after all the lines passed.

        Raises:
            IniSyntaxError: a line is not the expected one,
                or no section at all.
            EmptySection: a header follows a section without keys.
            DuplicateName: section or key redefined.
        """
        if ins is None:
            ins = Document()
        if sink is None:
            sink = NullSink()

        staged: dict[str, Section] = {}
        current: Section | None = None

        def commit(sect: Section) -> None:
            if sect.name in ins or sect.name in staged:
                raise DuplicateName(sect.name, 'section')
            staged[sect.name] = sect

        def open_section(line: str, lineno: int) -> Section:
            ret = Section()
            try:
                ret.parse_name_line(line)
            except IniError as e:
                raise IniSyntaxError(
                    'expected a section header.', lineno, line) from e
            return ret

        lineno = 0
        try:
            for lineno, line in enumerate(lines, 1):
                if _is_skipped(line):
                    sink.notify(
                        logging.DEBUG,
                        f'line {lineno}: comment or empty line, skipped.')
                    continue

                if current is None:
                    current = open_section(line, lineno)
                elif (key := Key.from_line(line)) is not None:
                    current.add(key)
                elif (nxt := Section.from_line(line)) is not None:
                    if current.empty:
                        raise EmptySection(
                            f'section [{current.name}] has no keys.',
                            lineno, line)
                    commit(current)
                    current = nxt
                else:
                    raise IniSyntaxError(
                        'neither a section header nor a key.', lineno, line)

            if current is None:
                raise IniSyntaxError('no section found.')
            commit(current)
        except IniError as e:
            # only line errors carry the line number by themselves.
            if getattr(e, 'lineno', None) is None and lineno:
                sink.notify(logging.ERROR, f'line {lineno}: {e}')
            else:
                sink.notify(logging.ERROR, str(e))
            raise

        ins._merge(staged.values())
        return ins

    @staticmethod
    def readstring(
        text: str,
        ins: Document | None = None,
        sink: DiagnosticSink | None = None
    ) -> Document:
        """Line endings (`\\r\\n`, `\\r`) are all taken as `\\n`."""
        if not text or text.isspace():
            if sink is not None:
                sink.notify(logging.ERROR, 'nothing to read.')
            raise IniSyntaxError('nothing to read.')
        return IniParser.readlines(_split_lines(text), ins, sink)

    @staticmethod
    def _decode_file(filename: str) -> str:
        with open(filename, 'rb') as fp:
            raw = fp.read()

        codec = chardet.detect(raw)
        if (
            codec is None or codec['encoding'] is None
            or codec['confidence'] < 0.8
        ):
            codec = {'encoding': 'utf-8'}

        # fallbacks
        try:
            return raw.decode(codec['encoding'])
        except UnicodeDecodeError:
            return raw.decode('gbk')

    def read_lines(self) -> list[str]:
        """读取`IniParser`实例指定的文件，按行拆分。

        Raises `OSError` (like `FileNotFoundError`) if unable to read,
        or `UnicodeDecodeError` if even the `gbk` fallback fails.
        """
        try:
            # when encoding is None, `open()` would fallback to system default.
            # and when encoding got wrong,
            # just `UnicodeDecodeError` and fallback to `chardet`.
            with open(self._fn, 'r', encoding=self._codec, newline='') as fp:
                text = fp.read()
        except UnicodeDecodeError:
            text = self._decode_file(self._fn)
        return _split_lines(text)

    def read(
        self,
        sink: DiagnosticSink | None = None,
        ins: Document | None = None
    ) -> Document:
        try:
            lines = self.read_lines()
        except (OSError, UnicodeDecodeError) as e:
            if sink is not None:
                sink.notify(
                    logging.ERROR,
                    f'Unable to read lines of "{self._fn}": {e}')
            raise
        return self.readlines(lines, ins, sink)

    def write(self, instance: Document, *, blank_lines: int = 1) -> None:
        """保存到*一个* INI 文件。

        注：没有键的小节照样写入，但除非它是最后一个小节，
        读回来的时候会报错，故予以告警。
        """
        with open(self._fn, 'w', encoding=self._codec) as fp:
            for i in instance.values():
                if i.empty:
                    warn(
                        f'[{i.name}] has no keys, '
                        'the file written may be unable to read back.')
                fp.write(i.serialize())
                fp.write('\n' * (blank_lines + 1))

    def __str__(self) -> str:
        return "INI file: " + super().__str__() + f" ({self._codec})"
