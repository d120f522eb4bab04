# -*- encoding: utf-8 -*-
# @File   : diagnostics.py
# @Time   : 2026/10/18 10:11:03
# @Author : Kariko Lin

"""Where the parser reports what it skipped, and why it failed.

Levels are those of `logging` (`logging.DEBUG`, `logging.ERROR`, ...).
A sink is only an observer: whatever it does, the parse result won't change.
"""

import logging
from typing import Protocol


class DiagnosticSink(Protocol):
    def notify(self, level: int, message: str) -> None:
        """Observe a notice; must not raise, nor affect the caller."""
        ...


class NullSink:
    """Discards everything. Default of the parser."""
    def notify(self, level: int, message: str) -> None:
        pass


class LoggingSink:
    """Forwards notices to a `logging.Logger`.

    The library never configures logging itself,
    see `python -m inidoc` for a `basicConfig()` example.
    """
    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.logger = logger or logging.getLogger('inidoc')

    def notify(self, level: int, message: str) -> None:
        self.logger.log(level, message)

    def __repr__(self) -> str:
        return f'LoggingSink({self.logger.name!r})'
