# -*- encoding: utf-8 -*-
# @File   : export.py
# @Time   : 2024/10/14 19:27:08
# @Author : Kariko Lin

"""Converting documents to and from JSON / YAML.

Only keys and values travel, as plain text:

- `IniDocument` <-> `{"key": "value", ...}`
- `CfgDocument` <-> `{"section": {"key": "value", ...}, ...}`

Comments and blank lines have no place in there and get lost.
Unlike `Parser`, these handlers DO raise on I/O errors.
"""

import json
from abc import ABCMeta, abstractmethod
from collections.abc import Mapping
from os import PathLike, fspath
from typing import IO

import yaml

from .cfg import CfgDocument
from .ini import IniDocument
from .model import ConfigSection
from .value import ValueLike


class InvalidInterchange(ValueError):
    """The JSON / YAML data does not have the expected shape."""
    pass


def _to_value(key: str, val: object) -> ValueLike:
    if val is None:  # `key:` in yaml, `null` in json
        return ''
    if isinstance(val, (str, int, float, bool)):
        return val
    raise InvalidInterchange(
        f'"{key}" should be a scalar, got {type(val).__name__}.')


def _fill(sect: ConfigSection, pairs: object, where: str) -> None:
    if not isinstance(pairs, Mapping):
        raise InvalidInterchange(f'{where} should be a mapping.')
    for k, v in pairs.items():
        sect[str(k)] = _to_value(str(k), v)


class InterchangeParser(metaclass=ABCMeta):
    def __init__(
        self, filename: str | PathLike[str], encoding: str = 'utf-8'
    ) -> None:
        self._fn = fspath(filename)
        self._codec = encoding

    @abstractmethod
    def _load(self, fp: IO[str]) -> object:
        raise NotImplementedError

    @abstractmethod
    def _dump(self, data: dict, fp: IO[str]) -> None:
        raise NotImplementedError

    def __read(self) -> object:
        with open(self._fn, 'r', encoding=self._codec) as fp:
            return self._load(fp)

    def read_ini(self) -> IniDocument:
        ret = IniDocument()
        data = self.__read()
        _fill(ret.section, {} if data is None else data, self._fn)
        return ret

    def read_cfg(self) -> CfgDocument:
        ret = CfgDocument()
        data = self.__read()
        if data is None:
            return ret
        if not isinstance(data, Mapping):
            raise InvalidInterchange(f'{self._fn} should be a mapping.')
        for name, pairs in data.items():
            _fill(ret.add_section(str(name)), {} if pairs is None else pairs,
                  f'[{name}]')
        return ret

    def write(self, doc: IniDocument | CfgDocument) -> None:
        with open(self._fn, 'w', encoding=self._codec) as fp:
            self._dump(doc.to_dict(), fp)

    def __str__(self) -> str:
        return self._fn


class JsonParser(InterchangeParser):
    def __init__(
        self, filename: str | PathLike[str], encoding: str = 'utf-8',
        indent: int = 2
    ) -> None:
        super().__init__(filename, encoding)
        self._indent = indent

    def _load(self, fp: IO[str]) -> object:
        try:
            return json.load(fp)
        except json.JSONDecodeError as e:
            raise InvalidInterchange(f'{self._fn}: {e}') from e

    def _dump(self, data: dict, fp: IO[str]) -> None:
        json.dump(data, fp, ensure_ascii=False, indent=self._indent)


class YamlParser(InterchangeParser):
    def _load(self, fp: IO[str]) -> object:
        try:
            return yaml.load(fp, yaml.SafeLoader)
        except yaml.YAMLError as e:
            raise InvalidInterchange(f'{self._fn}: {e}') from e

    def _dump(self, data: dict, fp: IO[str]) -> None:
        # keep file order.
        yaml.safe_dump(data, fp, allow_unicode=True, sort_keys=False)
