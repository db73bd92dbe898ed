import pytest

from fractol.strutil import atoi, atoi_safe, atoll, split, strtrim, substr


@pytest.mark.parametrize("number", [0, 5, -5, 123, -123, 2147483647, -2147483648])
def test_atoi_round_trip(number):
    assert atoi(str(number)) == number


@pytest.mark.parametrize("prefix", [" ", "\t", "\n", "\v\f\r ", "   "])
def test_atoi_skips_leading_whitespace(prefix):
    assert atoi(prefix + "-123") == int("-123")


def test_atoi_stops_at_first_non_digit():
    assert atoi("+77abc9") == int("77")
    assert atoi("12 34") == int("12")


def test_atoi_without_digits_is_zero():
    assert atoi("abc") == atoi("") == atoi("-") == 0


def test_atoi_single_sign_only():
    assert atoi("--5") == atoi("+-5") == 0


def test_atoi_wraps_to_32_bits():
    assert atoi(str(2**31)) == -(2**31)
    assert atoi("2147483648") == -2147483648


def test_atoi_overflow_beyond_64_bits():
    assert atoi(str(2**63)) == -1
    assert atoi(str(-(2**63) - 1)) == 0


@pytest.mark.parametrize("number", [0, 2**40, -(2**40), 2**63 - 1, -(2**63)])
def test_atoll_round_trip(number):
    assert atoll(str(number)) == number


def test_atoll_overflow():
    assert atoll(str(2**63)) == -1
    assert atoll(str(-(2**63) - 1)) == 0


@pytest.mark.parametrize("number", [0, 9, -9, 2147483647, -2147483648])
def test_atoi_safe_round_trip(number):
    assert atoi_safe("  " + str(number)) == number


@pytest.mark.parametrize("text", ["2147483648", "-2147483649", "99999999999"])
def test_atoi_safe_overflow_raises(text):
    with pytest.raises(OverflowError):
        atoi_safe(text)


def test_split_drops_empty_pieces():
    assert split(",,a,b,,c,", ",") == ["a", "b", "c"]


def test_split_invariants():
    text = "  Julia  Mandelbrot Nova   "
    pieces = split(text, " ")
    assert all(pieces)
    assert all(" " not in piece for piece in pieces)
    assert " ".join(pieces) == " ".join(text.split())


def test_split_only_separators_is_empty():
    assert split(";;;;", ";") == []
    assert split("", ";") == []


def test_split_nul_separator_keeps_whole_text():
    assert split("abc", "\0") == ["abc"]


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a,b", ",,")


def test_strtrim_both_ends():
    assert strtrim("xxhelloxyx", "xy") == "hello"


def test_strtrim_everything_removed():
    assert strtrim("aaaa", "a") == ""


def test_strtrim_empty_charset_keeps_text():
    assert strtrim("  pad  ", "") == "  pad  "


def test_strtrim_inner_chars_kept():
    assert strtrim("-a-b-", "-") == "a-b"


def test_substr_basic_and_clamped():
    assert substr("fractol", 2, 3) == "act"
    assert substr("fractol", 4, 100) == "tol"


def test_substr_start_past_end():
    assert substr("abc", 10, 2) == ""
    assert substr("abc", 3, 2) == ""


def test_substr_length_invariant():
    text = "Burning_Ship"
    for start in range(len(text) + 2):
        part = substr(text, start, 4)
        assert len(part) <= 4
        assert text.startswith(part, min(start, len(text)))


def test_substr_rejects_negative():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)