"""Skip runs of JSON formatting whitespace in a byte buffer.

Three equivalent strategies are provided: a plain comparison loop, a
byte lookup table, and a table keyed by little-endian 4- and 2-byte
words that lets whitespace runs be skipped several bytes at a time.
"""

from __future__ import annotations

from itertools import product

_WHITESPACE = frozenset(b" \t\n\r")
_SPACE = 0x20
_MAX_BITS = 0x20202020

_PAIRS = (b"\n ", b"\r ", b"\n\t", b"\r\t", b"  ", b"\t\t")


def _build_bits() -> frozenset[int]:
    keys = set(_WHITESPACE)
    keys.update(int.from_bytes(pair, "little") for pair in _PAIRS)
    # Every 4-byte combination of whitespace characters.
    keys.update(
        int.from_bytes(bytes(combo), "little")
        for combo in product(b" \t\n\r", repeat=4)
    )
    return frozenset(key for key in keys if key <= _MAX_BITS)


_BITS = _build_bits()


def _check_offset(offset: int) -> None:
    if offset < 0:
        raise IndexError(f"negative offset {offset}")


def skip_fmt4(src: bytes, offset: int) -> tuple[int, bool]:
    """Skip whitespace from ``offset``; return the new offset and whether the end was reached."""
    data = bytes(src)
    n = len(data)
    _check_offset(offset)
    if offset >= n:
        raise IndexError(f"offset {offset} out of range for length {n}")
    if data[offset] > _SPACE:
        return offset, False
    for pos in range(offset, n):
        if data[pos] not in _WHITESPACE:
            return pos, False
    return n, True


def skip_fmt4_table(src: bytes, offset: int) -> tuple[int, bool]:
    """Same as :func:`skip_fmt4`, driven by a byte lookup table."""
    data = bytes(src)
    n = len(data)
    if not n:
        raise IndexError("empty input")
    _check_offset(offset)
    while offset < n and data[offset] in _WHITESPACE:
        offset += 1
    return offset, offset == n


def skip_fmt4_bits(src: bytes, offset: int) -> tuple[int, bool]:
    """Same as :func:`skip_fmt4`, stepping over 4 and 2 bytes at a time where possible."""
    data = bytes(src)
    n = len(data)
    if not n:
        raise IndexError("empty input")
    _check_offset(offset)
    n4, n2 = n - n % 4, n - n % 2
    while (
        offset < n4
        and offset + 4 <= n
        and int.from_bytes(data[offset:offset + 4], "little") in _BITS
    ):
        offset += 4
    while (
        offset < n2
        and offset + 2 <= n
        and int.from_bytes(data[offset:offset + 2], "little") in _BITS
    ):
        offset += 2
    while offset < n and data[offset] in _WHITESPACE:
        offset += 1
    return offset, offset == n