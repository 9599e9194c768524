# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2026/10/19 15:20:17

"""Line oriented INI reading.

Each line is trimmed and comment stripped, then it is either
blank (skipped), a `[section]` header, or a `key = value` pair.
Anything else is an `IniSyntaxError` and the whole read fails.
"""

import logging
from io import StringIO, TextIOBase
from typing import Iterable

import chardet

from ..abstract import FileHandler
from ..errors import IniSyntaxError
from .model import IniFile
from .text import strip_comment, trim

__all__ = ['IniParser', 'IniFileReader']

logger = logging.getLogger(__name__)


class IniParser:
    @staticmethod
    def readlines(lines: Iterable[str]) -> IniFile:
        """Parse an iterable of lines (`'\\n'` endings are fine)."""
        header: dict[str, str] = {}
        sections: dict[str, dict[str, str]] = {}
        this_sect = header
        for lineno, i in enumerate(lines, 1):
            line = strip_comment(trim(i))
            if not line:
                continue
            if line[0] == '[':
                if line[-1] != ']':
                    raise IniSyntaxError.unclosed_section(line, lineno)
                name = trim(line[1:-1])
                if name in sections:
                    logger.debug('Section [%s] reopened at line %d.',
                                 name, lineno)
                this_sect = sections.setdefault(name, {})
                continue
            # only the first '=' delimits, values may hold more.
            key, eq, val = line.partition('=')
            if not eq:
                raise IniSyntaxError.invalid_line(line, lineno)
            this_sect[trim(key)] = trim(val)
        logger.debug(
            'Parsed %d sections, %d entries (%d in header).',
            len(sections),
            len(header) + sum(len(i) for i in sections.values()),
            len(header))
        return IniFile(header, sections)

    @classmethod
    def readstream(cls, buf: TextIOBase) -> IniFile:
        """Read an already decoded, already opened text stream.

        Opening and closing `buf` is up to the caller.
        """
        return cls.readlines(iter(buf.readline, ''))

    @classmethod
    def readstring(cls, text: str) -> IniFile:
        return cls.readstream(StringIO(text))


class IniFileReader(FileHandler[IniFile]):
    def __init__(self, filename: str, encoding: str | None = None) -> None:
        super().__init__(filename)
        self._codec = encoding

    @staticmethod
    def _decode_file(filename: str) -> StringIO:
        with open(filename, 'rb') as fp:
            raw = fp.read()

        codec = chardet.detect(raw)
        if codec['encoding'] is None or codec['confidence'] < 0.8:
            codec = {'encoding': 'utf-8'}

        # fallbacks
        try:
            buf = raw.decode(codec['encoding'])
        except UnicodeDecodeError:
            buf = raw.decode('gbk')
        return StringIO(buf)

    def read(self) -> IniFile:
        """Read the file this reader is bound to.

        `encoding=None` means the system default. When decoding
        fails, the codec is guessed with `chardet` and the file re-read.
        """
        try:
            with open(self._fn, 'r', encoding=self._codec) as fp:
                return IniParser.readstream(fp)
        except UnicodeDecodeError as e:
            logger.warning('Failed to decode %s as %s (%s), guessing codec.',
                           self._fn, self._codec, e.reason)
            return IniParser.readstream(self._decode_file(self._fn))

    def __str__(self) -> str:
        return 'INI file: ' + super().__str__() + f'({self._codec})'
