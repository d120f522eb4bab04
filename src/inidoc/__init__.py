# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/18 10:00:06
# @Author : Kariko Lin

from .diagnostics import DiagnosticSink, LoggingSink, NullSink
from .errors import (
    IniError,
    InvalidIdentifier,
    IniSyntaxError,
    EmptySection,
    DuplicateName,
    FormatError,
    RangeError
)
from .ini import Key, Section, Document, IniParser
from .naming import is_valid

__all__ = [
    'Key', 'Section', 'Document', 'IniParser', 'is_valid',
    'DiagnosticSink', 'LoggingSink', 'NullSink',
    'IniError', 'InvalidIdentifier', 'IniSyntaxError', 'EmptySection',
    'DuplicateName', 'FormatError', 'RangeError'
]
