# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/19 15:41:09

from .model import IniSection, IniFile
from .parser import IniParser, IniFileReader
from .text import trim, strip_comment

__all__ = [
    'IniSection', 'IniFile', 'IniParser', 'IniFileReader',
    'trim', 'strip_comment'
]
