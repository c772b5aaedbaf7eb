# -*- encoding: utf-8 -*-
# @File   : ini.py
# @Time   : 2024/10/13 02:05:33
# @Author : Kariko Lin

"""Flat `key = value` files, comments and blank lines kept on rewrite.

```ini
# comment, kept (trimmed)

app_name = Demo
version = 1.0
```
"""

import logging
from collections.abc import MutableMapping
from os import PathLike
from typing import Iterator

from .abstract import LineStore
from .consts import LineKind
from .model import ConfigSection, LineModel
from .parser import Parser, is_blank, is_comment, split_pair
from .value import ConfigValue, ValueLike

logger = logging.getLogger(__name__)


class IniDocument(Parser, MutableMapping[str, ConfigValue]):
    """A single, implicit section bound to a file.

    Behaves like `ConfigSection` (see there for each operation),
    except that every key created or removed also adds or drops its line,
    so saving keeps the original layout and appends new keys at the end.
    """

    def __init__(
        self, path: str | PathLike[str] = '', *,
        store: LineStore | None = None
    ) -> None:
        self._lines = LineModel()
        self._data = ConfigSection(listener=self._lines)
        super().__init__(path, store=store)

    @property
    def lines(self) -> LineModel:
        return self._lines

    @property
    def section(self) -> ConfigSection:
        """The underlying section. Changes made through it are tracked too."""
        return self._data

    def __getitem__(self, key: str) -> ConfigValue:
        return self._data[key]

    def __setitem__(self, key: str, value: ValueLike) -> None:
        self._data[key] = value

    def __delitem__(self, key: str) -> None:
        del self._data[key]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return 'IniDocument(%r) { .cnt = %d, .lines = %d }' % (
            self._path, len(self._data), len(self._lines))

    def insert(self, key: str, value: ValueLike) -> None:
        self._data.insert(key, value)

    def replace(self, key: str, value: ValueLike) -> None:
        self._data.replace(key, value)

    def get_or_insert_default(self, key: str) -> ConfigValue:
        return self._data.get_or_insert_default(key)

    def get(
        self, key: str, default: object = None,
        converter: type | str | None = None
    ) -> object:
        return self._data.get(key, default, converter)

    def pop(self, key: str) -> ConfigValue:  # type: ignore[override]
        return self._data.pop(key)

    def remove(self, key: str) -> None:
        self._data.remove(key)

    def exists(self, key: str) -> bool:
        return self._data.exists(key)

    def clear(self) -> None:
        """Drop every key AND every line (comments included)."""
        self._data.clear()
        self._lines.clear()

    def to_dict(self) -> dict[str, str]:
        return self._data.to_dict()

    def _read(self, lines: list[str]) -> None:
        for i in lines:
            if is_comment(i):
                self._lines.append_comment(i.strip())
            elif is_blank(i):
                self._lines.append_blank()
            elif (pair := split_pair(i)) is not None:
                key, val = pair
                if key in self._data:
                    # first one wins.
                    logger.debug('Duplicate key "%s" ignored.', key)
                    continue
                self._data.insert(key, val)
            else:
                logger.debug('Skipped unknown line: %r', i)

    def _write(self) -> list[str]:
        ret = []
        for kind, content in self._lines:
            if kind == LineKind.VALUE:
                ret.append(f'{content} = {self._data[content]}')
            elif kind in (LineKind.BLANK, LineKind.COMMENT):
                ret.append(content)
        return ret

    def _erase(self) -> None:
        self.clear()
