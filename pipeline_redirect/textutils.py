"""Small string helpers used when parsing command lines and here-documents."""

from __future__ import annotations

from itertools import zip_longest
from typing import Union

Text = Union[str, bytes, bytearray]


def _as_bytes(value: Text) -> bytes:
    """Return the bytes of ``value`` up to its first NUL, as a C string would see them."""
    data = bytes(value) if isinstance(value, (bytes, bytearray)) else value.encode("utf-8")
    return data.split(b"\0", 1)[0]


def split_words(text: str, sep: str) -> list[str]:
    """Split ``text`` on the single character ``sep``, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError("separator must be exactly one character")
    return [word for word in text.split(sep) if word]


def strncmp(first: Text, second: Text, n: int) -> int:
    """Compare at most ``n`` bytes of two strings.

    Returns zero when they match, otherwise the difference between the first
    pair of differing unsigned byte values. A string that ends early compares
    as if followed by a NUL byte.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    left = _as_bytes(first)[:n]
    right = _as_bytes(second)[:n]
    for a, b in zip_longest(left, right, fillvalue=0):
        if a != b:
            return a - b
    return 0