"""Reading and validating the integers given on the command line."""

from __future__ import annotations

from typing import Iterable, Sequence

from pushswap.textops import split

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_WHITESPACE = frozenset(" \t\r\n\v\f")


class InputError(ValueError):
    """The arguments are not a list of distinct integers."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def _is_ascii_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def parse_int(text: str) -> int:
    """Read a leading integer after whitespace and one optional sign.

    Reading stops at the first non-digit. Raises InputError as soon as the
    value leaves the 32-bit signed range.
    """
    if text is None:
        raise InputError()
    pos = 0
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    result = 0
    while pos < len(text) and _is_ascii_digit(text[pos]):
        result = result * 10 + ord(text[pos]) - ord("0")
        pos += 1
        if not INT_MIN <= sign * result <= INT_MAX:
            raise InputError()
    return sign * result


def _body(text: str) -> str:
    return text[1:] if text[:1] in ("+", "-") else text


def is_number(text: str) -> bool:
    """True for an optional sign followed by one or more ASCII digits."""
    if not text:
        return False
    body = _body(text)
    return bool(body) and all(_is_ascii_digit(ch) for ch in body)


def _validate(args: Sequence[str], strict: bool) -> None:
    for arg in args:
        body = _body(arg)
        if body and not all(_is_ascii_digit(ch) for ch in body):
            raise InputError()
        if strict and not body:
            raise InputError()
        value = parse_int(arg)
        if strict and value == 0 and not arg.startswith("0"):
            raise InputError()
    check_duplicates(args)


def validate_input(args: Sequence[str]) -> None:
    """Check separately given arguments; raises InputError on bad input.

    An empty argument or a lone sign is taken as zero here.
    """
    _validate(args, strict=False)


def check_duplicates(args: Iterable[str]) -> None:
    """Raise InputError if two arguments hold the same value."""
    seen: set[int] = set()
    for arg in args:
        value = parse_int(arg)
        if value in seen:
            raise InputError()
        seen.add(value)


def parse_arguments(args: Sequence[str]) -> list[int]:
    """The integers in the arguments, in order.

    A single argument is split on spaces, and its words are checked more
    strictly: a lone sign or a signed zero is rejected.
    """
    if len(args) == 1:
        if args[0] == "":
            raise InputError()
        words = split(args[0], " ")
        _validate(words, strict=True)
        return [parse_int(word) for word in words]
    validate_input(args)
    return [parse_int(arg) for arg in args]