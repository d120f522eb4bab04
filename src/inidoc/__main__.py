# -*- encoding: utf-8 -*-
# @File   : __main__.py
# @Time   : 2026/10/18 11:40:51
# @Author : Kariko Lin

"""`python -m inidoc [path]`: load an INI file and print what's inside."""

import logging
import sys
from argparse import ArgumentParser

from .diagnostics import LoggingSink
from .errors import IniError
from .ini import Document


def _build_args() -> ArgumentParser:
    args = ArgumentParser(
        prog='inidoc', description='Load an INI file and print it.')
    args.add_argument(
        'path', nargs='?',
        help='the INI file. Asked from stdin if omitted.')
    args.add_argument('--encoding', default=None)
    args.add_argument(
        '--log-file', default=None,
        help='write diagnostics into this file instead of stderr.')
    args.add_argument(
        '-v', '--verbose', action='store_true',
        help='also log skipped lines.')
    return args


def main(argv: list[str] | None = None) -> int:
    opts = _build_args().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if opts.verbose else logging.INFO,
        format='[%(asctime)s] %(levelname)s: %(message)s',
        filename=opts.log_file)

    path = opts.path
    if path is None:
        print('Enter ini file location.')
        path = sys.stdin.readline()
    path = path.strip()

    doc = Document()
    try:
        doc.load_from_file(path, opts.encoding, LoggingSink())
    except (OSError, UnicodeDecodeError, IniError) as e:
        logging.getLogger('inidoc').debug('load aborted: %r', e)
        print('Reading ini file failed.')
        return 1

    print('Reading ini file succeeded. Printing now.\n')
    for sect in doc.values():
        print(f'Section Name: {sect.name}')
        for key in sect.values():
            print(f'\tKey Name: {key.name} Key Value: {key.value}')
    return 0


if __name__ == '__main__':
    sys.exit(main())
