# -*- encoding: utf-8 -*-
# @File   : consts.py
# @Time   : 2024/10/12 21:03:16
# @Author : Kariko Lin

from enum import Enum


class ConfigError(int, Enum):
    """Last-operation state of a document. Inspect, never raised."""
    FILE_NOT_FOUND = 0
    FILE_OPEN_ERROR = 1
    FILE_READ_ERROR = 2
    NO_ERROR = 3
    FILE_WRITE_ERROR = 4  # fault after the temp file got opened.


class LineKind(int, Enum):
    BLANK = 0
    COMMENT = 1
    SECTION = 2
    VALUE = 3


COMMENT_PREFIX = '#'
DELIMITER = '='
