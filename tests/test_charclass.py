import pytest

from pushswap.charclass import (
    atoi,
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    itoa,
    to_lower,
    to_upper,
)


@pytest.mark.parametrize("code", range(256))
def test_is_alpha_matches_ascii_letters(code):
    ch = chr(code)
    assert is_alpha(code) == (ch.isascii() and ch.isalpha())


@pytest.mark.parametrize("code", range(256))
def test_is_digit_matches_ascii_digits(code):
    assert is_digit(code) == (chr(code) in "0123456789")


@pytest.mark.parametrize("code", range(256))
def test_is_alnum_is_union(code):
    assert is_alnum(code) == (is_alpha(code) or is_digit(code))


def test_is_ascii_bounds():
    assert is_ascii(0)
    assert is_ascii(127)
    assert not is_ascii(128)
    assert not is_ascii(-1)


def test_is_print_bounds():
    assert is_print(" ")
    assert is_print("~")
    assert not is_print(31)
    assert not is_print(127)


def test_accepts_single_characters():
    assert is_alpha("q")
    assert not is_alpha("1")
    with pytest.raises(ValueError):
        is_alpha("ab")


@pytest.mark.parametrize("code", range(256))
def test_case_mapping_matches_ascii(code):
    ch = chr(code)
    expected_lower = ch.lower() if "A" <= ch <= "Z" else ch
    expected_upper = ch.upper() if "a" <= ch <= "z" else ch
    assert to_lower(code) == ord(expected_lower)
    assert to_upper(code) == ord(expected_upper)


def test_case_mapping_keeps_str_type():
    assert to_lower("G") == "g"
    assert to_upper("g") == "G"
    assert to_upper("!") == "!"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("   -42", -42),
        ("\t\n\v\f\r+7", 7),
        ("123abc", 123),
        ("abc", 0),
        ("", 0),
        ("-", 0),
        ("--5", 0),
        ("- 5", 0),
    ],
)
def test_atoi(text, expected):
    assert atoi(text) == expected


@pytest.mark.parametrize("n", [0, 1, -1, 9, 10, -10, 2147483647, -2147483648])
def test_itoa_round_trip(n):
    assert atoi(itoa(n)) == n
    assert itoa(n) == str(n)


def test_itoa_zero():
    assert itoa(0) == "0"