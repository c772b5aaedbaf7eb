# -*- encoding: utf-8 -*-
# @File   : abstract.py
# @Time   : 2024/10/12 21:31:05
# @Author : Kariko Lin

from abc import ABCMeta, abstractmethod
from typing import Iterable


class KeyListener(metaclass=ABCMeta):
    """Gets told whenever a `ConfigSection` gains or loses a key."""

    @abstractmethod
    def key_added(self, key: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def key_removed(self, key: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def keys_cleared(self) -> None:
        raise NotImplementedError


class LineStore(metaclass=ABCMeta):
    """Where documents read their lines from and write them to.

    Implementations report failures by raising `storage.StorageError`
    with the matching `ConfigError` code.
    """

    @abstractmethod
    def exists(self, path: str) -> bool:
        raise NotImplementedError

    @abstractmethod
    def readlines(self, path: str) -> list[str]:
        """All lines of `path`, without line terminators."""
        raise NotImplementedError

    @abstractmethod
    def writelines(self, path: str, lines: Iterable[str]) -> None:
        """Replace whatever `path` holds with `lines`."""
        raise NotImplementedError
