# -*- encoding: utf-8 -*-
# @File   : errors.py
# @Time   : 2026/10/19 14:02:11

"""Exceptions raised while parsing or querying an INI document."""


class IniError(Exception):
    """Base class of everything `pyinipp` raises on its own."""
    pass


class IniSyntaxError(IniError):
    """To record malformed lines when reading INI text.

    Fatal to the parse: no `IniFile` is produced.
    """
    def __init__(self, message: str, line: str, lineno: int) -> None:
        super().__init__(f'{message} (line {lineno})')
        self.line = line
        self.lineno = lineno

    @classmethod
    def unclosed_section(cls, line: str, lineno: int) -> 'IniSyntaxError':
        return cls(
            f"The section '{line}' is missing a closing bracket.",
            line, lineno)

    @classmethod
    def invalid_line(cls, line: str, lineno: int) -> 'IniSyntaxError':
        return cls(f"The line '{line}' is invalid.", line, lineno)


# lookup errors are also `KeyError`s, so `Mapping` mixins keep working.
class UnknownSectionError(IniError, KeyError):
    def __init__(self, section: str) -> None:
        super().__init__(f"Unknown section '{section}'.")
        self.section = section

    def __str__(self) -> str:
        # KeyError would repr() the message.
        return str(self.args[0])


class UnknownEntryError(IniError, KeyError):
    def __init__(self, key: str, section: str | None = None) -> None:
        if section is None:
            msg = f"Unknown entry '{key}'."
        else:
            msg = f"Unknown entry '{key}' in section '{section}'."
        super().__init__(msg)
        self.key = key
        self.section = section

    def __str__(self) -> str:
        return str(self.args[0])
