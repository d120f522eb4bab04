# -*- encoding: utf-8 -*-
# @File   : abstract.py
# @Time   : 2026/10/18 10:14:30
# @Author : Kariko Lin

from abc import ABCMeta, abstractmethod
from typing import Generic, TypeVar

T = TypeVar('T')


class FileHandler(Generic[T], metaclass=ABCMeta):
    def __init__(self, filename: str) -> None:
        self._fn = self.unquote(filename)

    @staticmethod
    def unquote(filename: str) -> str:
        """Strip *one* pair of double quotes around the path,
        like the ones a shell or "copy as path" leaves behind."""
        if len(filename) >= 3 and filename[0] == filename[-1] == '"':
            filename = filename[1:-1].strip()
        return filename

    @property
    def filename(self) -> str:
        return self._fn

    @abstractmethod
    def read(self) -> T:
        raise NotImplementedError

    @abstractmethod
    def write(self, instance: T) -> None:
        raise NotImplementedError

    def __str__(self) -> str:
        return self._fn
