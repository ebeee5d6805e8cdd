import pytest

from srvcommon.normalize import NormalizeSettings, normalize_url


def test_fully_qualified_url_reduced_to_path():
    result = normalize_url(b"http://www.example.com/a/b?x=1")
    assert result == normalize_url(b"/a/b")
    assert normalize_url(b"/a/b") == b"/a/b"


def test_host_without_path_is_empty():
    assert normalize_url(b"http://www.example.com") == b""


def test_relative_url_left_alone():
    assert normalize_url(b"index.html") == b"index.html"


def test_single_slash_after_scheme_left_alone():
    assert normalize_url(b"http:/a") == b"http:/a"


def test_escaped_slash_decoded():
    assert normalize_url(b"/a%2Fb") == normalize_url(b"/a/b")


def test_escaped_traversal_resolved():
    assert normalize_url(b"/a/%2e%2e/b") == normalize_url(b"/b")
    assert normalize_url(b"/b") == b"/b"


def test_unicode_escape_decoded():
    assert normalize_url(b"/%u0041") == b"/A"


def test_query_removed_before_canonicalising():
    assert normalize_url(b"/a?b/../c") == normalize_url(b"/a")


def test_text_in_text_out():
    assert normalize_url("http://www.example.com/x/../y") == "/y"


def test_none_rejected():
    with pytest.raises(ValueError):
        normalize_url(None)


def test_default_settings_convert_utf8():
    assert normalize_url("/café".encode("utf-8")) == "/café".encode("cp1252")


def test_favor_dbcs_keeps_codepage_bytes():
    path = b"/caf\xc3\xa9"
    assert normalize_url(path, NormalizeSettings(favor_dbcs=True)) == path


def test_system_dbcs_protects_trail_bytes():
    settings = NormalizeSettings(system_dbcs=True, codepage="cp932")
    path = "/表/x".encode("cp932")
    assert normalize_url(path, settings) == path


def test_from_mapping_defaults():
    settings = NormalizeSettings.from_mapping({})
    assert settings == NormalizeSettings()


def test_from_mapping_disabling_non_utf8_disables_dbcs():
    settings = NormalizeSettings.from_mapping(
        {"EnableNonUTF8": 0, "EnableDBCS": 1, "FavorDBCS": 1}
    )
    assert settings.enable_non_utf8 is False
    assert settings.enable_dbcs is False
    assert settings.favor_dbcs is False


def test_from_mapping_enables_dbcs_and_favor():
    settings = NormalizeSettings.from_mapping({"EnableDBCS": 1, "FavorDBCS": 1})
    assert settings.enable_dbcs is True
    assert settings.favor_dbcs is True


def test_from_mapping_favor_requires_dbcs():
    settings = NormalizeSettings.from_mapping({"FavorDBCS": 1})
    assert settings.favor_dbcs is False


def test_from_mapping_ignores_non_integer_values():
    settings = NormalizeSettings.from_mapping({"EnableNonUTF8": "0"})
    assert settings.enable_non_utf8 is True


def test_from_mapping_system_dbcs():
    assert NormalizeSettings.from_mapping({}, system_dbcs=True).system_dbcs is True