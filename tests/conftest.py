"""Shared fixtures for pyinipp tests."""

import pytest

from pyinipp import IniFile, loads

SAMPLE = """\
; settings for the demo service
name = demo
version = 3

[server]
host = example.org   # public name
port = 8080
debug = TRUE
ratio = 0.75
url = http://x/?a=1&b=2

[client]
retries = 3x
enabled = notabool

[]
anon = yes
"""


@pytest.fixture
def sample_text() -> str:
    return SAMPLE


@pytest.fixture
def sample(sample_text) -> IniFile:
    return loads(sample_text)
