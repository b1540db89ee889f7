import pytest

from pushswap.parsing import (
    InputError,
    check_duplicates,
    is_number,
    parse_arguments,
    parse_int,
    validate_input,
)


def test_input_error_message():
    assert str(InputError()) == "Error"
    assert issubclass(InputError, ValueError)


@pytest.mark.parametrize("text", ["42", "-42", "+7", "0"])
def test_parse_int_plain(text):
    assert parse_int(text) == int(text)


def test_parse_int_limits():
    assert parse_int("2147483647") == 2147483647
    assert parse_int("-2147483648") == -2147483648


@pytest.mark.parametrize("text", ["2147483648", "-2147483649", "99999999999"])
def test_parse_int_overflow(text):
    with pytest.raises(InputError):
        parse_int(text)


def test_parse_int_stops_at_non_digit():
    assert parse_int("  -12abc") == parse_int("-12")
    assert parse_int("abc") == parse_int("0")


@pytest.mark.parametrize("text", ["1", "-1", "+10", "007"])
def test_is_number_true(text):
    assert is_number(text) is True


@pytest.mark.parametrize("text", ["", "-", "+", "1a", " 1", "--1", "1.5"])
def test_is_number_false(text):
    assert is_number(text) is False


def test_check_duplicates_detects_equal_values():
    with pytest.raises(InputError):
        check_duplicates(["1", "2", "1"])
    with pytest.raises(InputError):
        check_duplicates(["5", "+5"])
    check_duplicates(["1", "2", "3"])
    assert parse_arguments(["1", "2", "3"]) == [1, 2, 3]


@pytest.mark.parametrize("args", [["1", "x"], ["1", "2 3"], ["1", "2", "2"], ["1", "3000000000"]])
def test_validate_input_rejects(args):
    with pytest.raises(InputError):
        validate_input(args)


def test_separate_arguments():
    assert parse_arguments(["3", "-2", "+1"]) == [3, -2, 1]


def test_single_argument_is_split():
    assert parse_arguments(["3 2  1"]) == [3, 2, 1]
    assert parse_arguments(["3 2 1"]) == parse_arguments(["3", "2", "1"])


def test_single_argument_of_spaces_is_empty():
    assert parse_arguments(["   "]) == []


def test_empty_single_argument_rejected():
    with pytest.raises(InputError):
        parse_arguments([""])


@pytest.mark.parametrize("arg", ["1 -", "1 +", "-0 1", "+0", "1\t2", "1 1"])
def test_single_argument_strict_rejects(arg):
    with pytest.raises(InputError):
        parse_arguments([arg])


def test_separate_arguments_take_lone_sign_as_zero():
    assert parse_arguments(["-", "5"]) == [0, 5]
    assert parse_arguments(["-0", "5"]) == parse_arguments(["0", "5"])


def test_separate_empty_argument_clashes_with_zero():
    with pytest.raises(InputError):
        parse_arguments(["", "0"])


def test_round_trip_through_text():
    values = [10, -3, 2147483647, -2147483648, 0]
    assert parse_arguments([" ".join(map(str, values))]) == values
    assert parse_arguments([str(v) for v in values]) == values