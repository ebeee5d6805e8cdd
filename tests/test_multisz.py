import pytest

from srvcommon.multisz import MultiSz, split_comma_delimited_string


def test_buffer_layout_pinned():
    assert MultiSz(["ab", "c"]).to_buffer() == "ab\0c\0\0"


def test_empty_buffer_layout():
    empty = MultiSz()
    assert empty.to_buffer() == "\0"
    assert empty.char_count() == len(empty.to_buffer())
    assert len(empty) == 0


def test_round_trip_through_buffer():
    original = MultiSz(["one", "two", "three"])
    restored = MultiSz.from_buffer(original.to_buffer())
    assert restored == original
    assert list(restored) == ["one", "two", "three"]


def test_from_bytes_buffer():
    parsed = MultiSz.from_buffer(b"x\0yz\0\0trailing")
    assert list(parsed) == ["x", "yz"]


def test_char_count_matches_buffer_length():
    multi = MultiSz(["alpha", "b", "gamma"])
    assert multi.char_count() == len(multi.to_buffer())


def test_append_empty_is_ignored():
    multi = MultiSz(["a"])
    multi.append("")
    assert list(multi) == ["a"]


def test_append_with_embedded_nul_splits():
    multi = MultiSz()
    multi.append("a\0b")
    assert list(multi) == ["a", "b"]


def test_find_string_case_sensitive():
    multi = MultiSz(["Alpha", "beta"])
    assert multi.find_string("Alpha") is True
    assert multi.find_string("alpha") is False


def test_find_string_no_case():
    multi = MultiSz(["Alpha", "beta"])
    assert multi.find_string_no_case("ALPHA") is True
    assert multi.find_string_no_case("gamma") is False


def test_find_empty_raises():
    with pytest.raises(ValueError):
        MultiSz(["a"]).find_string("")
    with pytest.raises(ValueError):
        MultiSz(["a"]).find_string_no_case("")


def test_reset_clears():
    multi = MultiSz(["a", "b"])
    multi.reset()
    assert len(multi) == 0
    assert multi == MultiSz()


def test_copy_to_buffer_fits():
    multi = MultiSz(["abc"])
    assert multi.copy_to_buffer(multi.char_count()) == multi.to_buffer()


def test_copy_to_buffer_too_small():
    multi = MultiSz(["abc"])
    with pytest.raises(ValueError):
        multi.copy_to_buffer(multi.char_count() - 1)


def test_equality_depends_on_order():
    assert MultiSz(["a", "b"]) == MultiSz(["a", "b"])
    assert not MultiSz(["a", "b"]) == MultiSz(["b", "a"])
    assert not MultiSz(["a"]) == MultiSz(["a", "b"])


def test_split_basic():
    assert list(split_comma_delimited_string("a,b,c")) == ["a", "b", "c"]


def test_split_trim():
    result = split_comma_delimited_string(" a ,\tb\r, c", trim_entries=True)
    assert list(result) == ["a", "b", "c"]


def test_split_without_trim_keeps_spaces():
    result = split_comma_delimited_string(" a , b")
    assert list(result) == [" a ", " b"]


def test_split_drops_empty_entries():
    kept = split_comma_delimited_string("a,,b,", remove_empty_entries=False)
    removed = split_comma_delimited_string("a,,b,", remove_empty_entries=True)
    assert list(kept) == ["a", "b"]
    assert kept == removed


def test_split_whitespace_only_entries_removed_when_trimmed():
    result = split_comma_delimited_string(
        "  , x ,  ", trim_entries=True, remove_empty_entries=True
    )
    assert list(result) == ["x"]


def test_split_none_raises():
    with pytest.raises(ValueError):
        split_comma_delimited_string(None)