"""Byte-buffer helpers working on bytearray and memoryview objects."""

from __future__ import annotations

import sys
from typing import Optional, Union

Buffer = Union[bytearray, memoryview]
Readable = Union[bytes, bytearray, memoryview]

_SIZE_MAX = sys.maxsize * 2 + 1


def _check_length(n: int, *buffers: Readable) -> None:
    if n < 0:
        raise ValueError("length must not be negative")
    for buf in buffers:
        if len(buf) < n:
            raise ValueError(f"buffer of {len(buf)} bytes is shorter than {n}")


def memset(buf: Buffer, c: int, n: int) -> Buffer:
    """Fill the first n bytes of buf with the low byte of c."""
    _check_length(n, buf)
    buf[:n] = bytes((c & 0xFF,)) * n
    return buf


def bzero(buf: Buffer, n: int) -> Buffer:
    """Zero the first n bytes of buf."""
    return memset(buf, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """A zeroed buffer of count * size bytes.

    Raises MemoryError when the product would not fit in a size_t.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count and size > _SIZE_MAX // count:
        raise MemoryError("requested size overflows")
    return bytearray(count * size)


def memchr(data: Readable, c: int, n: int) -> Optional[int]:
    """Index of the first byte equal to c's low byte among the first n, or None."""
    _check_length(n, data)
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a: Readable, b: Readable, n: int) -> int:
    """Difference of the first differing unsigned bytes within n, else 0."""
    _check_length(n, a, b)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def memcpy(dst: Buffer, src: Readable, n: int) -> Buffer:
    """Copy n bytes from src to the start of dst."""
    _check_length(n, dst, src)
    dst[:n] = bytes(src[:n])
    return dst


def memmove(dst: Buffer, src: Readable, n: int) -> Buffer:
    """Copy n bytes from src to dst; correct even when the two overlap."""
    _check_length(n, dst, src)
    chunk = bytes(src[:n])
    dst[:n] = chunk
    return dst