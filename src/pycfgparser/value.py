# -*- encoding: utf-8 -*-
# @File   : value.py
# @Time   : 2024/10/12 21:10:42
# @Author : Kariko Lin

"""Typed scalar kept as text.

Whatever type a value was assigned with, only its canonical text is stored,
so saving and loading again always gives back the same thing.
"""

from typing import Callable, Union


class TypeConversionError(ValueError):
    """Raised when the canonical text is not a literal of the wanted type."""

    def __init__(self, type_name: str, text: str) -> None:
        super().__init__(
            f'String value is non convertible to type {type_name}: {text!r}')
        self.type_name = type_name
        self.text = text


ValueLike = Union['ConfigValue', str, int, float, bool]


def format_value(value: ValueLike) -> str:
    # bool goes first, it is an int as well.
    if isinstance(value, bool):
        return 'true' if value else 'false'
    elif isinstance(value, ConfigValue):
        return value.text
    elif isinstance(value, str):
        return value
    elif isinstance(value, int):
        return str(value)
    elif isinstance(value, float):
        return repr(value)
    raise TypeError(
        f'unsupported config value type: {type(value).__name__}')


def _is_plain_number(text: str) -> bool:
    # `int()` / `float()` would take '1_000' and ' 1 ' as well.
    return '_' not in text and text == text.strip()


def _parse_int(text: str) -> int:
    if not _is_plain_number(text):
        raise TypeConversionError('int', text)
    try:
        return int(text)
    except ValueError:
        raise TypeConversionError('int', text) from None


def _parse_float(text: str) -> float:
    """Also takes 'nan', 'inf' and 'infinity', as `repr()` writes them.

    Mind that nan never equals itself, even after a round trip.
    """
    if not _is_plain_number(text):
        raise TypeConversionError('float', text)
    try:
        return float(text)
    except ValueError:
        raise TypeConversionError('float', text) from None


def _parse_bool(text: str) -> bool:
    if text not in ('true', 'false'):
        raise TypeConversionError('bool', text)
    return text == 'true'


def _parse_char(text: str) -> str:
    if len(text) != 1:
        raise TypeConversionError('char', text)
    return text


_PARSERS: dict[object, Callable[[str], object]] = {
    int: _parse_int,
    float: _parse_float,
    bool: _parse_bool,
    str: str,
    'char': _parse_char,
}


class ConfigValue:
    """... is a string, with typed views on demand.

    ```python
    v = ConfigValue(100)
    v.text      # '100'
    v.as_int()  # 100
    v.as_bool() # TypeConversionError
    ```
    """
    __slots__ = ('_data',)

    def __init__(self, value: ValueLike = '') -> None:
        self._data = format_value(value)

    @property
    def text(self) -> str:
        return self._data

    def set(self, value: ValueLike) -> None:
        """Assign in place, so references held elsewhere see the change."""
        self._data = format_value(value)

    def to(self, target: type | str) -> object:
        """Parse as `int`, `float`, `bool`, `str` or `'char'`."""
        try:
            parser = _PARSERS[target]
        except (KeyError, TypeError):
            raise TypeError(f'unsupported conversion type: {target!r}') from None
        return parser(self._data)

    def as_int(self) -> int:
        return _parse_int(self._data)

    def as_float(self) -> float:
        return _parse_float(self._data)

    def as_bool(self) -> bool:
        return _parse_bool(self._data)

    def as_char(self) -> str:
        return _parse_char(self._data)

    def as_str(self) -> str:
        return self._data

    def __str__(self) -> str:
        return self._data

    def __repr__(self) -> str:
        return f'ConfigValue({self._data!r})'

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ConfigValue):
            return self._data == other._data
        if isinstance(other, str):
            return self._data == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]
