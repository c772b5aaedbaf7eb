# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2024/10/12 21:22:37
# @Author : Kariko Lin

"""
Basically the key-value structure shared by both dialects,
and the line records used to rewrite files faithfully.
"""

from collections.abc import Mapping, MutableMapping
from typing import Callable, Iterator, NamedTuple

from .abstract import KeyListener
from .consts import LineKind
from .value import ConfigValue, ValueLike


class KeyNotFound(KeyError):
    def __init__(self, key: str) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f'Non existent key: {self.key}'


class SectionNotFound(KeyError):
    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f'Section not found: {self.name}'


class ConfigSection(MutableMapping[str, ConfigValue]):
    """Insertion-ordered `str: ConfigValue` dict.

    Apart from the usual mapping protocol:

    - `insert()` never overwrites (first writer wins),
    - `replace()` never creates,
    - `get_or_insert_default()` creates an empty value when missing,
    - `remove()` quietly ignores missing keys, while
      `section[key]`, `pop()` and `del` raise `KeyNotFound`.

    Note that `update()` is still the `MutableMapping` one,
    i.e. merging another mapping in.
    """

    def __init__(
        self,
        pairs_to_import: Mapping[str, ValueLike] | None = None,
        *, listener: KeyListener | None = None
    ) -> None:
        self.__raw: dict[str, ConfigValue] = {}
        self._listener = listener
        if pairs_to_import:
            self.update(pairs_to_import)

    def __create(self, key: str, value: ValueLike) -> ConfigValue:
        self.__raw[key] = ConfigValue(value)
        if self._listener is not None:
            self._listener.key_added(key)
        return self.__raw[key]

    def __discard(self, key: str) -> ConfigValue:
        val = self.__raw.pop(key)
        if self._listener is not None:
            self._listener.key_removed(key)
        return val

    def __getitem__(self, key: str) -> ConfigValue:
        if key not in self.__raw:
            raise KeyNotFound(key)
        return self.__raw[key]

    def __setitem__(self, key: str, value: ValueLike) -> None:
        if key in self.__raw:
            self.__raw[key].set(value)
        else:
            self.__create(key, value)

    def __delitem__(self, key: str) -> None:
        if key not in self.__raw:
            raise KeyNotFound(key)
        self.__discard(key)

    def __contains__(self, key: object) -> bool:
        return key in self.__raw

    def __len__(self) -> int:
        return len(self.__raw)

    def __iter__(self) -> Iterator[str]:
        return iter(self.__raw)

    def __repr__(self) -> str:
        return '{ .cnt = %d }' % len(self.__raw)

    def insert(self, key: str, value: ValueLike) -> None:
        if key not in self.__raw:
            self.__create(key, value)

    def replace(self, key: str, value: ValueLike) -> None:
        if key in self.__raw:
            self.__raw[key].set(value)

    def get_or_insert_default(self, key: str) -> ConfigValue:
        """The live value of `key`, created with empty text when missing."""
        if key in self.__raw:
            return self.__raw[key]
        return self.__create(key, '')

    def get(
        self, key: str, default: object = None,
        converter: type | str | None = None
    ) -> object:
        """Lookup with a fallback. `converter` goes to `ConfigValue.to()`."""
        if key not in self.__raw:
            return default
        if converter is None:
            return self.__raw[key]
        return self.__raw[key].to(converter)

    def pop(self, key: str) -> ConfigValue:  # type: ignore[override]
        if key not in self.__raw:
            raise KeyNotFound(key)
        return self.__discard(key)

    def remove(self, key: str) -> None:
        if key in self.__raw:
            self.__discard(key)

    def exists(self, key: str) -> bool:
        return key in self.__raw

    def clear(self) -> None:
        self.__raw.clear()
        if self._listener is not None:
            self._listener.keys_cleared()

    def to_dict(self) -> dict[str, str]:
        """Plain `key: text` snapshot."""
        return {k: v.text for k, v in self.__raw.items()}


class LineEntry(NamedTuple):
    """One structural line.

    `content` is the comment text for COMMENT, the key for VALUE,
    the section name for SECTION, and empty for BLANK.
    Values themselves are never kept here.
    """
    kind: LineKind
    content: str = ''


class LineModel(KeyListener):
    """Ordered line records of a document.

    Also listens to a flat document's section,
    adding or dropping VALUE records as keys come and go.
    """

    def __init__(self) -> None:
        self.__lines: list[LineEntry] = []

    def __iter__(self) -> Iterator[LineEntry]:
        return iter(self.__lines)

    def __len__(self) -> int:
        return len(self.__lines)

    def __getitem__(self, index: int) -> LineEntry:
        return self.__lines[index]

    def __repr__(self) -> str:
        return f'LineModel({self.__lines!r})'

    def append(self, kind: LineKind, content: str = '') -> None:
        self.__lines.append(LineEntry(kind, content))

    def append_blank(self) -> None:
        self.append(LineKind.BLANK)

    def append_comment(self, text: str) -> None:
        self.append(LineKind.COMMENT, text)

    def append_section(self, name: str) -> None:
        self.append(LineKind.SECTION, name)

    def remove_first(self, kind: LineKind, content: str) -> bool:
        for i, line in enumerate(self.__lines):
            if line.kind == kind and line.content == content:
                del self.__lines[i]
                return True
        return False

    def drop(self, predicate: Callable[[LineEntry], bool]) -> None:
        self.__lines = [i for i in self.__lines if not predicate(i)]

    def clear(self) -> None:
        self.__lines.clear()

    def key_added(self, key: str) -> None:
        self.append(LineKind.VALUE, key)

    def key_removed(self, key: str) -> None:
        self.remove_first(LineKind.VALUE, key)

    def keys_cleared(self) -> None:
        self.drop(lambda x: x.kind == LineKind.VALUE)
