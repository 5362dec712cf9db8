import pytest

from minishell.libft.convert import (
    atoi,
    itoa,
    split,
    striteri,
    strjoin,
    strmapi,
    strtrim,
    substr,
)


def test_atoi_skips_space_and_stops_at_letters():
    assert atoi("     +1234abc") == 1234


def test_atoi_negative_and_empty():
    assert atoi("\t\n -42") == -42
    assert atoi("abc") == 0
    assert atoi("") == 0


def test_atoi_only_one_sign():
    assert atoi("+-5") == 0
    assert atoi("--5") == 0


@pytest.mark.parametrize("n", [0, 7, -1, 34695, -34695, 2147483647, -2147483648])
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_examples():
    assert itoa(-34695) == "-34695"
    assert itoa(-2147483648) == "-2147483648"
    assert itoa(0) == "0"


def test_substr():
    assert substr("123456789", 2, 4) == "3456"
    assert substr("abc", 5, 2) == ""
    assert substr("abc", 1, 100) == "bc"


def test_substr_negative_rejected():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)


def test_strjoin():
    first, second = "left", "right"
    joined = strjoin(first, second)
    assert joined.startswith(first) and joined.endswith(second)
    assert len(joined) == len(first) + len(second)


def test_strtrim():
    assert strtrim("ooeeohelloworldeeoe", "eo") == "helloworld"
    assert strtrim("  padded  ", None) == "  padded  "
    assert strtrim("  padded  ", "") == "  padded  "
    assert strtrim("eoeo", "eo") == ""


def test_split():
    assert split("hello world", " ") == ["hello", "world"]
    assert split("   a  b   ", " ") == ["a", "b"]
    assert split("", " ") == []


def test_split_bad_separator():
    with pytest.raises(ValueError):
        split("a,b", ",,")


def test_strmapi_receives_indices():
    result = strmapi("abc", lambda i, c: c * (i + 1))
    assert result == "a" + "bb" + "ccc"


def test_striteri_modifies_in_place():
    chars = list("abcd")
    striteri(chars, lambda i, c: c.upper() if i % 2 == 0 else None)
    assert "".join(chars) == "AbCd"