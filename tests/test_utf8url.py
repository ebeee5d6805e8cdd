import pytest

from srvcommon.utf8url import decode_utf8_unit, is_utf8_url


def test_decode_two_byte_unit():
    lead, trail = "é".encode("utf-8")
    assert decode_utf8_unit(lead, trail, 0) == (ord("é"), 2)


def test_decode_three_byte_unit():
    lead, t1, t2 = "你".encode("utf-8")
    assert decode_utf8_unit(lead, t1, t2) == (ord("你"), 3)


@pytest.mark.parametrize(
    "lead,t1,t2",
    [(0x41, 0x42, 0x43), (0xE4, 0xBD, 0x41), (0xC3, 0x41, 0x00), (0xF0, 0x9F, 0x98)],
)
def test_decode_rejects_non_units(lead, t1, t2):
    assert decode_utf8_unit(lead, t1, t2) is None


def test_ascii_path_is_utf8():
    assert is_utf8_url(b"/index.html?a=b") is True


def test_latin_character_in_utf8_is_accepted():
    assert is_utf8_url("/café/menu".encode("utf-8"), "cp1252") is True


def test_raw_latin1_byte_is_rejected():
    assert is_utf8_url("/café".encode("latin-1"), "cp1252") is False


def test_unmappable_character_is_rejected():
    assert is_utf8_url("/你好".encode("utf-8"), "cp1252") is False


def test_double_byte_codepage_accepts_cjk():
    assert is_utf8_url("/你好".encode("utf-8"), "gbk") is True


def test_truncated_sequence_is_rejected():
    assert is_utf8_url(b"/abc\xe4\xbd", "cp1252") is False


def test_stops_at_nul():
    assert is_utf8_url(b"/ok\0\xff\xff", "cp1252") is True


def test_favor_dbcs_valid_in_codepage_is_not_utf8():
    assert is_utf8_url("/你好".encode("gbk"), "gbk", favor_dbcs=True) is False


def test_favor_dbcs_invalid_in_codepage_is_utf8():
    assert is_utf8_url(b"/abc\x81", "gbk", favor_dbcs=True) is True