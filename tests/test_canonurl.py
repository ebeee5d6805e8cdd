import pytest

from srvcommon.canonurl import canon_url


def test_parent_segment_removes_previous():
    assert canon_url(b"/a/b/../c") == b"/a/c"


def test_current_segment_removed():
    assert canon_url(b"/a/./b") == canon_url(b"/a/b")
    assert canon_url(b"/a/b") == b"/a/b"


@pytest.mark.parametrize(
    "path",
    [b"/index.html", b"/a/b/c/", b"/.well/x", b"/a..b", b"/a/..."],
)
def test_plain_paths_unchanged(path):
    assert canon_url(path) == path


def test_repeated_slashes_collapse():
    assert canon_url(b"/a//b///c") == canon_url(b"/a/b/c")


def test_parent_at_end():
    assert canon_url(b"/a/b/..") == canon_url(b"/a/")


def test_cannot_climb_above_root():
    assert canon_url(b"/../a") == canon_url(b"/a")


def test_relative_path_is_not_backed_up():
    assert canon_url(b"a/../b") == b"a/b"


def test_stops_at_nul():
    assert canon_url(b"/a\0/../x") == b"/a"


def test_utf8_two_byte_converted():
    assert canon_url("/café".encode("utf-8")) == "/café".encode("cp1252")


def test_utf8_three_byte_converted():
    assert canon_url("/x€y".encode("utf-8")) == "/x€y".encode("cp1252")


def test_overlong_dots_treated_as_dots():
    assert canon_url(b"/a/\xc0\xae\xc0\xae/b") == canon_url(b"/a/../b")


def test_non_utf8_high_bytes_kept():
    assert canon_url(b"/caf\xe9") == b"/caf\xe9"


def test_favor_dbcs_keeps_valid_codepage_bytes():
    path = b"/caf\xc3\xa9"
    assert canon_url(path, favor_dbcs=True) == path


def test_dbcs_trail_byte_is_not_a_separator():
    path = "/表/x".encode("cp932")
    assert canon_url(path, dbcs_locale=True, codepage="cp932") == path


def test_without_dbcs_locale_trail_byte_is_a_separator():
    path = "/表/x".encode("cp932")
    assert canon_url(path, codepage="cp932") == b"/\x95\\x"


def test_utf8_to_double_byte_codepage():
    result = canon_url("/表/x".encode("utf-8"), dbcs_locale=True, codepage="cp932")
    assert result == "/表/x".encode("cp932")


@pytest.mark.parametrize("path", [b"/a/b/../c", b"/x/./y//z", b"/a/..", b"/p/q/"])
def test_idempotent(path):
    once = canon_url(path)
    assert canon_url(once) == once


@pytest.mark.parametrize("path", [b"/a/b/../c", b"//x", b"/a/./b/./", b"/a/../../b"])
def test_never_longer(path):
    assert len(canon_url(path)) <= len(path)


def test_none_rejected():
    with pytest.raises(ValueError):
        canon_url(None)