# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/13 03:20:44
# @Author : Kariko Lin

import logging

from .cfg import CfgDocument
from .consts import ConfigError, LineKind
from .export import InvalidInterchange, JsonParser, YamlParser
from .ini import IniDocument
from .model import (
    ConfigSection, KeyNotFound, LineEntry, LineModel, SectionNotFound
)
from .parser import Parser
from .storage import FileStore, MemoryStore, StorageError
from .value import ConfigValue, TypeConversionError

__all__ = [
    'IniDocument', 'CfgDocument', 'Parser',
    'ConfigSection', 'ConfigValue', 'LineEntry', 'LineModel',
    'ConfigError', 'LineKind',
    'KeyNotFound', 'SectionNotFound', 'TypeConversionError',
    'FileStore', 'MemoryStore', 'StorageError',
    'JsonParser', 'YamlParser', 'InvalidInterchange',
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')
