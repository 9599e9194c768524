import logging

import pytest

from pyinipp import IniFileReader, IniSyntaxError


def test_read_utf8(tmp_path) -> None:
    fn = tmp_path / 'a.ini'
    fn.write_text('[名称]\n键 = 值\n', encoding='utf-8')
    ini = IniFileReader(str(fn), 'utf-8').read()
    assert ini.get('名称', '键') == '值'


def test_read_falls_back_to_detected_codec(tmp_path, caplog) -> None:
    fn = tmp_path / 'b.ini'
    fn.write_bytes('[s]\nk = größe\n'.encode('utf-8'))
    with caplog.at_level(logging.WARNING, logger='pyinipp'):
        ini = IniFileReader(str(fn), 'ascii').read()
    assert ini.get('s', 'k') == 'größe'
    assert 'guessing codec' in caplog.text


def test_read_syntax_error(tmp_path) -> None:
    fn = tmp_path / 'c.ini'
    fn.write_text('[s\n', encoding='utf-8')
    with pytest.raises(IniSyntaxError):
        IniFileReader(str(fn), 'utf-8').read()


def test_missing_file(tmp_path) -> None:
    with pytest.raises(OSError):
        IniFileReader(str(tmp_path / 'nope.ini')).read()


def test_str(tmp_path) -> None:
    reader = IniFileReader('x.ini', 'utf-8')
    assert reader.filename == 'x.ini'
    assert str(reader) == 'INI file: x.ini(utf-8)'
