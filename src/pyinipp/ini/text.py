# -*- encoding: utf-8 -*-
# @File   : text.py
# @Time   : 2026/10/19 14:11:27

"""Line level helpers shared by the parser.

No quoting support: a `#` or `;` always starts a comment,
even in the middle of a value.
"""

from typing import Iterable

WHITESPACE = ' \t\n\r\f\v'
COMMENT_MARKS = ('#', ';')


def trim(s: str, charset: str = WHITESPACE) -> str:
    """Drop leading and trailing characters found in `charset`."""
    return s.strip(charset)


def strip_comment(s: str, mark: str | Iterable[str] | None = None) -> str:
    """Truncate `s` at the first character found in `mark`.

    Without `mark`, strips at the first `#` and then, on what is left,
    at the first `;`. Two passes, in that order.
    """
    if mark is None:
        for i in COMMENT_MARKS:
            s = strip_comment(s, i)
        return s
    pos = min((p for p in map(s.find, mark) if p != -1), default=-1)
    return s if pos == -1 else s[:pos]
