# -*- encoding: utf-8 -*-
# @File   : storage.py
# @Time   : 2024/10/13 00:41:19
# @Author : Kariko Lin

import codecs
import logging
import os
import shutil
import tempfile
from os.path import dirname, exists, realpath
from typing import Iterable

from chardet import detect as guess_codec

from .abstract import LineStore
from .consts import ConfigError

logger = logging.getLogger(__name__)


def split_lines(text: str) -> list[str]:
    r"""Break on `\n` (and `\r\n`) only, unlike `str.splitlines()`."""
    lines = text.replace('\r\n', '\n').split('\n')
    if lines[-1] == '':
        lines.pop()
    return lines


class StorageError(Exception):
    """To report a `ConfigError` from a `LineStore` to the document."""

    def __init__(self, code: ConfigError, path: str, reason: object = None):
        super().__init__(f'{code.name}: {path}' + (
            f' ({reason})' if reason is not None else ''))
        self.code = code
        self.path = path


class FileStore(LineStore):
    """Plain files on disk.

    Reading tries `encoding` first and falls back to `chardet`.
    Writing goes to a temporary file in the same folder,
    which then replaces the target, so a failed save never leaves a
    truncated file behind.
    """

    def __init__(self, encoding: str = 'utf-8') -> None:
        codecs.lookup(encoding)  # LookupError right here, not on save.
        self._codec = encoding

    @property
    def encoding(self) -> str:
        return self._codec

    def exists(self, path: str) -> bool:
        return exists(path)

    def _decode(self, path: str, raw: bytes) -> str:
        try:
            return raw.decode(self._codec)
        except UnicodeDecodeError:
            pass
        codec = guess_codec(raw)
        if codec is None or codec['encoding'] is None \
                or codec['confidence'] < 0.8:
            raise StorageError(ConfigError.FILE_READ_ERROR, path,
                               f'undecodable as {self._codec}')
        logger.info('"%s" is not %s, guessed %s instead.',
                    path, self._codec, codec['encoding'])
        try:
            return raw.decode(codec['encoding'])
        except (UnicodeDecodeError, LookupError) as e:
            raise StorageError(ConfigError.FILE_READ_ERROR, path, e) from e

    def readlines(self, path: str) -> list[str]:
        try:
            fp = open(path, 'rb')
        except OSError as e:
            raise StorageError(ConfigError.FILE_OPEN_ERROR, path, e) from e
        with fp:
            try:
                raw = fp.read()
            except OSError as e:
                raise StorageError(ConfigError.FILE_READ_ERROR, path, e) from e
        text = self._decode(path, raw)
        if text.startswith('\ufeff'):
            text = text[1:]
        return split_lines(text)

    def writelines(self, path: str, lines: Iterable[str]) -> None:
        # write through symlinks instead of replacing them.
        target = realpath(path)
        try:
            fd, tmp = tempfile.mkstemp(
                prefix='.', suffix='.tmp', dir=dirname(target))
        except OSError as e:
            raise StorageError(ConfigError.FILE_OPEN_ERROR, path, e) from e
        done = False
        try:
            try:
                fp = open(fd, 'w', encoding=self._codec, newline='\n')
            except BaseException:
                os.close(fd)
                raise
            try:
                with fp:
                    for i in lines:
                        fp.write(i)
                        fp.write('\n')
                if exists(target):
                    shutil.copymode(target, tmp)
                else:
                    os.chmod(tmp, 0o644)
            except (OSError, UnicodeEncodeError) as e:
                raise StorageError(
                    ConfigError.FILE_WRITE_ERROR, path, e) from e
            try:
                os.replace(tmp, target)
            except OSError as e:
                raise StorageError(
                    ConfigError.FILE_OPEN_ERROR, path, e) from e
            done = True
        finally:
            if not done and exists(tmp):
                os.remove(tmp)

    def __str__(self) -> str:
        return f'FileStore({self._codec})'


class MemoryStore(LineStore):
    """Keeps "files" as strings in a dict. Handy for tests and scratch docs."""

    def __init__(self, files: dict[str, str] | None = None) -> None:
        self.files: dict[str, str] = dict(files or {})

    def exists(self, path: str) -> bool:
        return path in self.files

    def readlines(self, path: str) -> list[str]:
        if path not in self.files:
            raise StorageError(ConfigError.FILE_OPEN_ERROR, path)
        return split_lines(self.files[path])

    def writelines(self, path: str, lines: Iterable[str]) -> None:
        self.files[path] = ''.join(f'{i}\n' for i in lines)

    def __str__(self) -> str:
        return f'MemoryStore({len(self.files)} files)'
