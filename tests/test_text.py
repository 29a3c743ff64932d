import math

import pytest

from searchcore.text import (
    NPOS,
    find,
    left_trim,
    right_trim,
    stod,
    stoi,
    stol,
    stoul,
    string_hash,
    substr,
    trim,
)


@pytest.mark.parametrize(
    "text, sub, pos",
    [("tomato: potato", ":", 0), ("abcabc", "bc", 2), ("aaaa", "a", 3)],
)
def test_find_locates_substring(text, sub, pos):
    index = find(text, sub, pos)
    assert index >= pos
    assert text[index:].startswith(sub)
    assert sub not in text[pos:index]


def test_find_missing_returns_npos():
    assert find("potato", "x") == NPOS
    assert find("abc", "a", 1) == NPOS


def test_find_at_end_is_allowed():
    assert find("abc", "a", 3) == NPOS


def test_find_past_end_raises():
    with pytest.raises(IndexError):
        find("abc", "a", 4)


def test_substr_basic_and_to_end():
    assert substr("key: value", 0, 3) == "key"
    assert substr("key: value", 4) == " value"
    assert substr("abc", 3) == ""


def test_substr_length_clipped():
    assert substr("abc", 1, 100) == "bc"


def test_substr_out_of_range():
    with pytest.raises(IndexError):
        substr("abc", 4)


def test_trims():
    assert left_trim(" \t value with spaces ") == "value with spaces "
    assert right_trim(" value with spaces \r\n") == " value with spaces"
    assert trim("  \v\f value with spaces \t ") == "value with spaces"
    assert trim("   ") == ""
    assert trim("") == ""


def test_trim_is_idempotent():
    once = trim("\t a b \n")
    assert trim(once) == once


def test_string_hash_empty():
    assert string_hash("") == 0


def test_string_hash_range_and_determinism():
    for word in ["tomato", "potato", "a", "value#not_a_comment"]:
        h = string_hash(word)
        assert 0 <= h < 2**32
        assert string_hash(word) == h
        assert string_hash(word.encode("utf-8")) == h


def test_string_hash_distinguishes():
    assert string_hash("tomato") != string_hash("potato")
    assert string_hash("ab") != string_hash("ba")


def test_string_hash_high_bytes():
    assert string_hash("\u00ff") == string_hash("\u00ff".encode("utf-8"))
    assert 0 <= string_hash(b"\xff\x80") < 2**32


def test_stoi_basic():
    assert stoi("34") == 34
    assert stoi("  53") == 53
    assert stoi("-42abc") == -42
    assert stoi("+30") == 30


def test_stoi_no_digits_is_zero():
    assert stoi("potato") == 0
    assert stoi("") == 0


def test_stoi_wraps_to_32_bits():
    assert stoi("2147483648") == -2147483648


def test_stol_saturates():
    assert stol("99999999999999999999999") == 2**63 - 1
    assert stol("-99999999999999999999999") == -(2**63)
    assert stol("2147483648") == 2147483648


def test_stoul():
    assert stoul("42") == 42
    assert stoul("-1") == 2**64 - 1
    assert stoul("999999999999999999999999") == 2**64 - 1


def test_stod_decimal():
    assert stod("122.34") == 122.34
    assert stod("0.85") == 0.85
    assert stod("2") == 2.0
    assert stod("  -1.5e3xyz") == -1.5e3


def test_stod_hex_and_special():
    assert stod("0x10") == 16.0
    assert math.isinf(stod("inf"))
    assert stod("-Infinity") == -math.inf
    assert math.isnan(stod("nan(abc)"))


def test_stod_no_number():
    assert stod("potato") == 0.0
    assert stod("") == 0.0