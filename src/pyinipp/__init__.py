# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/19 15:44:52

"""Minimal INI reading: sections, `key=value`, `#`/`;` comments.

    >>> ini = loads('[net]\\nport = 8080  ; http')
    >>> ini.getval('net', 'port', 0)
    8080
"""

import logging
from typing import TextIO

from .errors import (
    IniError,
    IniSyntaxError,
    UnknownEntryError,
    UnknownSectionError
)
from .ini import IniFile, IniFileReader, IniParser, IniSection

__version__ = '1.0'

__all__ = [
    'IniFile', 'IniSection', 'IniParser', 'IniFileReader',
    'IniError', 'IniSyntaxError', 'UnknownSectionError', 'UnknownEntryError',
    'load', 'loads'
]

logging.getLogger(__name__).addHandler(logging.NullHandler())


def load(fp: TextIO) -> IniFile:
    """Parse an opened text stream. `fp` is left open."""
    return IniParser.readstream(fp)


def loads(text: str) -> IniFile:
    return IniParser.readstring(text)
