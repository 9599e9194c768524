# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2026/10/19 14:48:36

"""
Read-only INI structure: named sections plus a header.

The header holds pairs appearing before any `[section]` line.
Nothing here mutates after `IniParser` hands the instance over.
"""

from collections.abc import Mapping
from typing import Any, Callable, Iterator, TypeVar

from ..errors import UnknownEntryError, UnknownSectionError
from .convert import converter_for

T = TypeVar('T')

_LOOKUP_ERRORS = (UnknownSectionError, UnknownEntryError)


class IniSection(Mapping[str, str]):
    """A view of one section, bound by name to its `IniFile`.

    It keeps no pairs of its own, every query goes back to the file,
    so a view of a missing section fails on use, not silently.
    `name` is `None` for the header.
    """

    def __init__(self, section_name: str | None, ini: 'IniFile') -> None:
        self._name = section_name
        self._ini = ini

    @property
    def name(self) -> str | None:
        return self._name

    def __getitem__(self, key: str) -> str:
        return self._ini.get(self._name, key)

    def __iter__(self) -> Iterator[str]:
        return iter(self._ini._pairs(self._name))

    def __len__(self) -> int:
        return len(self._ini._pairs(self._name))

    def __str__(self) -> str:
        return '<header>' if self._name is None else f'[{self._name}]'

    def __repr__(self) -> str:
        return '%s { .cnt = %d }' % (self, len(self))

    # raises instead of `Mapping.get()`'s `None`.
    def get(self, key: str) -> str:  # type: ignore[override]
        return self._ini.get(self._name, key)

    def dget(self, key: str, default: str) -> str:
        return self._ini.dget(self._name, key, default)

    def getval(
        self, key: str, default: T,
        converter: Callable[[str], Any] | None = None
    ) -> T:
        return self._ini.getval(self._name, key, default, converter)

    def to_dict(self) -> dict[str, str]:
        return dict(self._ini._pairs(self._name))


class IniFile(Mapping[str, IniSection]):
    """INI document. Supports the following (comments aside):

        ```ini
        key = val  ; header pair, see `self.header`.

        [section]
        key = val
        []         ; the section named ''
        ```

    Query with `get()` (raises), `dget()` (falls back) and
    `getval()` (falls back, converts). Pass `None` as the section
    to look in the header.
    """

    def __init__(
        self,
        header: Mapping[str, str] | None = None,
        sections: Mapping[str, Mapping[str, str]] | None = None
    ) -> None:
        # copied, so the caller's dicts can't reach in afterwards.
        self.__header: dict[str, str] = dict(header or {})
        self.__raw_dicts: dict[str, dict[str, str]] = {
            k: dict(v) for k, v in (sections or {}).items()
        }

    @property
    def header(self) -> IniSection:
        """Pairs at the top of the document, not belonging to any section."""
        return IniSection(None, self)

    def _pairs(self, section: str | None) -> dict[str, str]:
        if section is None:
            return self.__header
        try:
            return self.__raw_dicts[section]
        except KeyError:
            raise UnknownSectionError(section) from None

    def __getitem__(self, key: str) -> IniSection:
        return self.section(key)

    def __contains__(self, key: object) -> bool:
        return key in self.__raw_dicts

    def __len__(self) -> int:
        return len(self.__raw_dicts)

    def __iter__(self) -> Iterator[str]:
        return iter(self.__raw_dicts)

    def __repr__(self) -> str:
        return '<IniFile { .header = %d, .sections = %d }>' % (
            len(self.__header), len(self.__raw_dicts))

    def section(self, name: str) -> IniSection:
        if name not in self.__raw_dicts:
            raise UnknownSectionError(name)
        return IniSection(name, self)

    def get(  # type: ignore[override]
        self, section: str | None, key: str
    ) -> str:
        pairs = self._pairs(section)
        try:
            return pairs[key]
        except KeyError:
            raise UnknownEntryError(key, section) from None

    def dget(self, section: str | None, key: str, default: str) -> str:
        try:
            return self.get(section, key)
        except _LOOKUP_ERRORS:
            return default

    def getval(
        self, section: str | None, key: str, default: T,
        converter: Callable[[str], Any] | None = None
    ) -> T:
        """Look up and convert, returning `default` on any failure.

        Without `converter`, the type of `default` decides:
        `bool` takes `true`/`false` (any case), `int` and `float`
        take plain decimal literals, `str` takes the text as is.
        A missing key and an unparsable value look the same from here,
        use `get()` and convert yourself to tell them apart.
        """
        try:
            text = self.get(section, key)
        except _LOOKUP_ERRORS:
            return default
        if converter is None:
            converter = converter_for(default)
        if converter is None:
            return text  # type: ignore[return-value]
        try:
            return converter(text)
        except (ValueError, TypeError):
            return default

    def to_dict(self) -> dict[str, dict[str, str]]:
        """Deep copy of every section. The header is not included."""
        return {k: v.copy() for k, v in self.__raw_dicts.items()}
