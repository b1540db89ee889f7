"""String searching, slicing, splitting and bounded copy helpers."""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional, Union

Buffer = Union[bytearray, memoryview]
Readable = Union[bytes, bytearray, memoryview]


def _check_char(c: str) -> None:
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")


def strchr(text: str, c: str) -> Optional[int]:
    """Index of the first occurrence of c in text, or None.

    Searching for the NUL character finds the terminator at len(text).
    """
    _check_char(c)
    if c == "\0":
        index = text.find(c)
        return len(text) if index < 0 else index
    index = text.find(c)
    return None if index < 0 else index


def strrchr(text: str, c: str) -> Optional[int]:
    """Index of the last occurrence of c in text, or None.

    Searching for the NUL character finds the terminator at len(text).
    """
    _check_char(c)
    if c == "\0":
        return len(text)
    index = text.rfind(c)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters; the difference of the first mismatch, else 0.

    A string that ends early compares as if followed by NUL.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    for i in range(min(n, max(len(s1), len(s2)))):
        a = ord(s1[i]) if i < len(s1) else 0
        b = ord(s2[i]) if i < len(s2) else 0
        if a != b:
            return a - b
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of needle in the first length characters of haystack, or None.

    An empty needle is found at index 0.
    """
    if not needle:
        return 0
    last_start = min(len(haystack) - 1, length - len(needle))
    for pos in range(last_start + 1):
        if haystack.startswith(needle, pos):
            return pos
    return None


def substr(text: str, start: int, length: int) -> str:
    """At most length characters of text from start; empty if start is past the end."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """The concatenation of s1 and s2."""
    return s1 + s2


def strtrim(text: str, charset: str) -> str:
    """text with every leading and trailing character found in charset removed."""
    return text.strip(charset)


def split(text: str, sep: str) -> list[str]:
    """The non-empty words of text separated by runs of sep."""
    _check_char(sep)
    return [word for word in text.split(sep) if word]


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """A new string built from func(index, char) for every character of text."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def striteri(chars: MutableSequence[str], func: Callable[[int, str], str]) -> None:
    """Replace each element of chars, in place, with func(index, element)."""
    for index, ch in enumerate(chars):
        chars[index] = func(index, ch)


def _cstr(data: Readable) -> bytes:
    raw = bytes(data)
    end = raw.find(0)
    return raw if end < 0 else raw[:end]


def _check_capacity(dst: Buffer, dstsize: int) -> None:
    if dstsize < 0:
        raise ValueError("dstsize must not be negative")
    if len(dst) < dstsize:
        raise ValueError(f"buffer of {len(dst)} bytes is shorter than {dstsize}")


def strlcpy(dst: Buffer, src: Readable, dstsize: int) -> int:
    """Copy src into dst, NUL-terminated, writing at most dstsize bytes.

    Returns the length of src, so a result >= dstsize means truncation.
    """
    _check_capacity(dst, dstsize)
    source = _cstr(src)
    if dstsize > 0:
        count = min(dstsize - 1, len(source))
        dst[:count] = source[:count]
        dst[count] = 0
    return len(source)


def strlcat(dst: Buffer, src: Readable, dstsize: int) -> int:
    """Append src to the NUL-terminated string in dst within dstsize bytes.

    Returns the length the full result would have had.
    """
    _check_capacity(dst, dstsize)
    source = _cstr(src)
    terminator = bytes(dst[:dstsize]).find(0)
    dst_len = dstsize if terminator < 0 else terminator
    if dstsize <= dst_len:
        return dstsize + len(source)
    count = min(len(source), dstsize - dst_len - 1)
    dst[dst_len:dst_len + count] = source[:count]
    dst[dst_len + count] = 0
    return dst_len + len(source)