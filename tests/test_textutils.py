import pytest

from sigtalk.textutils import (
    atoi,
    itoa,
    memcmp,
    split,
    strchr,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


def test_atoi_stops_at_first_non_digit():
    assert atoi("   +1234ab2") == 1234


@pytest.mark.parametrize("value", [0, 7, -7, 2147483647, -2147483648, 1000])
def test_atoi_itoa_round_trip(value):
    assert atoi(itoa(value)) == value


def test_atoi_handles_sign_and_whitespace():
    assert atoi("\t\n -15") == -int("15")
    assert atoi("abc") == 0
    assert atoi("+-3") == 0


def test_itoa_wraps_like_int32():
    assert itoa(2147483648) == itoa(-2147483648)
    assert itoa(0) == "0"


def test_split_skips_leading_separators():
    assert split("                          olol", " ") == ["olol"]


def test_split_invariants():
    pieces = split("a,,b,c,,", ",")
    assert "".join(pieces) == "abc"
    assert all(piece and "," not in piece for piece in pieces)


def test_split_empty_cases():
    assert split("", " ") == []
    assert split("abc", "") == []


def test_strtrim():
    assert strtrim("WarhammerWa", "War") == "hamme"
    assert strtrim("xxxx", "x") == ""
    assert strtrim("keep", "") == "keep"


def test_substr():
    assert substr("HonorAmongThieves", 5, 5) == "Among"
    assert substr("short", 10, 3) == ""
    with pytest.raises(ValueError):
        substr("text", -1, 2)


def test_strnstr():
    text = "Honor Among Thieves"
    index = strnstr(text, "Am", 20)
    assert index == 6
    assert text[index:index + 2] == "Am"
    assert strnstr(text, "Am", 7) is None
    assert strnstr(text, "", 0) == 0


def test_memcmp():
    assert memcmp("3", "2", 1) > 0
    assert memcmp(b"abc", b"abd", 2) == 0
    assert memcmp(b"abc", b"abd", 3) < 0
    with pytest.raises(ValueError):
        memcmp(b"a", b"ab", 2)


def test_strchr():
    assert strchr("Dishonored", "z") is None
    index = strchr("Dishonored", "o")
    assert "Dishonored"[index] == "o"
    assert "o" not in "Dishonored"[:index]
    assert strchr("abc", "\0") == len("abc")
    with pytest.raises(ValueError):
        strchr("abc", "ab")


def test_strrchr():
    text = "Hello There!"
    index = strrchr(text, "e")
    assert text[index] == "e"
    assert "e" not in text[index + 1:]
    assert strrchr(text, "z") is None
    assert strrchr(text, "\0") == len(text)