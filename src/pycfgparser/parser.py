# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2024/10/13 01:12:50
# @Author : Kariko Lin

"""The load/save driver both dialects share.

Lines come from (and go to) a `LineStore`, `FileStore` by default.
File problems never raise here: they end up in `Parser.error`,
which the caller should check after `load()`, `reload()` and `save()`.
Misused accessors and bad type conversions DO raise, right away.

Lines that look like nothing we know are skipped without any error.
"""

import logging
from abc import ABCMeta, abstractmethod
from io import TextIOBase
from os import PathLike, fspath

from .abstract import LineStore
from .consts import COMMENT_PREFIX, DELIMITER, ConfigError
from .storage import FileStore, StorageError, split_lines

logger = logging.getLogger(__name__)


def is_comment(line: str) -> bool:
    return line.strip().startswith(COMMENT_PREFIX)


def is_blank(line: str) -> bool:
    return not line.strip()


def split_pair(line: str) -> tuple[str, str] | None:
    """`' key = val=ue '` -> `('key', 'val=ue')`. `None` if not a pair."""
    if DELIMITER not in line:
        return None
    key, val = line.split(DELIMITER, 1)
    key = key.strip()
    if not key:
        return None
    return key, val.strip()


def section_name(line: str) -> str | None:
    """`' [ name ] '` -> `'name'`. `None` if not a (named) header."""
    line = line.strip()
    if len(line) < 2 or line[0] != '[' or line[-1] != ']':
        return None
    return line[1:-1].strip() or None


class Parser(metaclass=ABCMeta):
    """Base of `IniDocument` and `CfgDocument`.

    Keeps the bound path and the last error only;
    each dialect owns its own data and implements `_read()`,
    `_write()` and `_erase()`.
    """

    def __init__(
        self, path: str | PathLike[str] = '', *,
        store: LineStore | None = None
    ) -> None:
        self._path = fspath(path)
        self._error = ConfigError.NO_ERROR
        self._store: LineStore = store if store is not None else FileStore()
        self._read_file()

    @property
    def path(self) -> str:
        return self._path

    @property
    def store(self) -> LineStore:
        return self._store

    @property
    def error(self) -> ConfigError:
        return self._error

    def get_error(self) -> ConfigError:
        return self._error

    def flush(self) -> None:
        """Clear the error state. Data stays as is."""
        self._error = ConfigError.NO_ERROR

    def load(self, path: str | PathLike[str]) -> None:
        self.flush()
        self._erase()
        self._path = fspath(path)
        self._read_file()

    def reload(self) -> None:
        self.flush()
        self._erase()
        self._read_file()

    def save(self, path: str | PathLike[str] | None = None) -> None:
        """Write to `path`, which also becomes the bound path.

        Without any path, saving does nothing.
        """
        self.flush()
        if path:
            self._path = fspath(path)
        if not self._path:
            return
        try:
            self._store.writelines(self._path, self._write())
        except StorageError as e:
            self._error = e.code
            logger.warning('Failed to save config: %s', e)
            return
        logger.info('Saved "%s".', self._path)

    def readstream(self, buf: TextIOBase) -> None:
        """Replace the contents with what a decoded text stream holds.

        Path and error state are left untouched.
        """
        self._erase()
        self._read(split_lines(buf.read()))

    def writestream(self, buf: TextIOBase) -> None:
        for i in self._write():
            buf.write(i)
            buf.write('\n')

    def dumps(self) -> str:
        return ''.join(f'{i}\n' for i in self._write())

    def _read_file(self) -> None:
        if not self._path:
            return
        if not self._store.exists(self._path):
            self._error = ConfigError.FILE_NOT_FOUND
            logger.warning('Config "%s" not found.', self._path)
            return
        try:
            lines = self._store.readlines(self._path)
        except StorageError as e:
            self._error = e.code
            logger.warning('Failed to read config: %s', e)
            return
        self._read(lines)
        logger.info('Loaded "%s" (%d lines).', self._path, len(lines))

    @abstractmethod
    def _read(self, lines: list[str]) -> None:
        raise NotImplementedError

    @abstractmethod
    def _write(self) -> list[str]:
        raise NotImplementedError

    @abstractmethod
    def _erase(self) -> None:
        raise NotImplementedError

    def __str__(self) -> str:
        return self._path
