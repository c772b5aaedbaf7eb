# -*- encoding: utf-8 -*-
# @File   : cfg.py
# @Time   : 2024/10/13 02:48:11
# @Author : Kariko Lin

"""Sectioned files:

```ini
# comments and blank lines between sections are kept.
[AppInfo]
name = Demo
version = 1.0

[Settings]
debug_mode = true
```

A section body runs from its header to the next blank line
(or the next header, or EOF). Only the section boundaries are recorded,
bodies are written back from the live sections, so comments inside
a body do not survive a rewrite.
"""

import logging
from collections.abc import Mapping, MutableMapping
from os import PathLike
from typing import Iterator

from .abstract import LineStore
from .consts import LineKind
from .model import ConfigSection, LineModel, SectionNotFound
from .parser import (
    Parser, is_blank, is_comment, section_name, split_pair
)
from .value import ValueLike

logger = logging.getLogger(__name__)


class CfgDocument(Parser, MutableMapping[str, ConfigSection]):
    """Named `ConfigSection`s in file order.

    `doc[name]` raises `SectionNotFound` for unknown sections,
    use `add_section()` to create one first.
    """

    def __init__(
        self, path: str | PathLike[str] = '', *,
        store: LineStore | None = None
    ) -> None:
        self._lines = LineModel()
        self.__sections: dict[str, ConfigSection] = {}
        super().__init__(path, store=store)

    @property
    def lines(self) -> LineModel:
        return self._lines

    def add_section(self, name: str) -> ConfigSection:
        """Create `name` if missing. Its header goes to the end of file."""
        if name not in self.__sections:
            self.__sections[name] = ConfigSection()
            self._lines.append_section(name)
        return self.__sections[name]

    def remove_section(self, name: str) -> None:
        if name in self.__sections:
            del self.__sections[name]
            self._lines.remove_first(LineKind.SECTION, name)

    def section(self, name: str) -> ConfigSection:
        if name not in self.__sections:
            raise SectionNotFound(name)
        return self.__sections[name]

    def sections(self) -> list[str]:
        return list(self.__sections)

    def __getitem__(self, name: str) -> ConfigSection:
        return self.section(name)

    def __setitem__(
        self, name: str, value: Mapping[str, ValueLike]
    ) -> None:
        """Replace the body of `name`, creating the section if missing."""
        sect = self.add_section(name)
        # copy first, `value` may be `sect` itself.
        pairs = dict(value.items())
        sect.clear()
        sect.update(pairs)

    def __delitem__(self, name: str) -> None:
        if name not in self.__sections:
            raise SectionNotFound(name)
        self.remove_section(name)

    def __contains__(self, name: object) -> bool:
        return name in self.__sections

    def __iter__(self) -> Iterator[str]:
        return iter(self.__sections)

    def __len__(self) -> int:
        return len(self.__sections)

    def __repr__(self) -> str:
        return 'CfgDocument(%r) { .sections = %d, .lines = %d }' % (
            self._path, len(self.__sections), len(self._lines))

    def clear(self) -> None:
        self.__sections.clear()
        self._lines.clear()

    def to_dict(self) -> dict[str, dict[str, str]]:
        return {k: v.to_dict() for k, v in self.__sections.items()}

    def _read(self, lines: list[str]) -> None:
        i, total = 0, len(lines)
        while i < total:
            line = lines[i]
            i += 1
            if is_comment(line):
                self._lines.append_comment(line.strip())
            elif is_blank(line):
                self._lines.append_blank()
            elif (name := section_name(line)) is not None:
                i = self.__read_body(self.add_section(name), lines, i)
            else:
                logger.debug('Skipped line outside any section: %r', line)

    @staticmethod
    def __read_body(sect: ConfigSection, lines: list[str], i: int) -> int:
        """Fill `sect` from `lines[i:]`, return where the outer loop resumes."""
        while i < len(lines):
            line = lines[i]
            if is_blank(line):
                return i + 1  # the separator, writer adds it back.
            if section_name(line) is not None:
                return i
            i += 1
            if is_comment(line):
                logger.debug('Dropped comment inside section: %r', line)
            elif (pair := split_pair(line)) is not None:
                sect[pair[0]] = pair[1]
            else:
                logger.debug('Skipped unknown line: %r', line)
        return i

    def _write(self) -> list[str]:
        ret = []
        for kind, content in self._lines:
            if kind == LineKind.SECTION:
                ret.append(f'[{content}]')
                sect = self.__sections[content]
                ret.extend(f'{k} = {v}' for k, v in sect.items())
                ret.append('')
            else:
                ret.append(content)
        return ret

    def _erase(self) -> None:
        self.clear()
