# -*- encoding: utf-8 -*-
# @File   : convert.py
# @Time   : 2026/10/19 14:30:02

"""Strict text -> scalar conversion for `getval()`.

The whole string must be a literal of the requested type,
a valid prefix followed by garbage does not count.
"""

from re import ASCII
from re import compile as regex
from typing import Any, Callable

_INT = regex(r'[+-]?[0-9]+', ASCII)
_FLOAT = regex(r'[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?', ASCII)


def parse_bool(text: str) -> bool:
    lowered = text.lower()
    if lowered == 'true':
        return True
    if lowered == 'false':
        return False
    raise ValueError(f'not a boolean: {text!r}')


def parse_int(text: str) -> int:
    # int() alone would accept '1_000' and padding.
    if _INT.fullmatch(text) is None:
        raise ValueError(f'not an integer: {text!r}')
    return int(text)


def parse_float(text: str) -> float:
    # and float() would accept 'inf', 'nan'.
    if _FLOAT.fullmatch(text) is None:
        raise ValueError(f'not a number: {text!r}')
    return float(text)


def converter_for(default: object) -> Callable[[str], Any] | None:
    """Pick a parser by the type of `default`.

    Returns `None` for `str`, meaning "use the raw text".
    """
    # bool first, it is an int subclass.
    if isinstance(default, bool):
        return parse_bool
    if isinstance(default, int):
        return parse_int
    if isinstance(default, float):
        return parse_float
    if isinstance(default, str) or default is None:
        return None
    return type(default)
