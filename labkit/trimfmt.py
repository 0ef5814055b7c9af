"""Variants of skipping formatting whitespace in a buffer from an offset."""

from __future__ import annotations

from dataclasses import dataclass

_WHITESPACE = frozenset(b" \t\n\r")
_SPACE = 0x20


def _check_offset(off: int) -> None:
    if off < 0:
        raise IndexError(f"negative offset {off}")


@dataclass
class FormatTrimmer:
    """Holds a buffer and offers several whitespace-skipping strategies over it."""

    buf: bytes = b""

    def _skip(self, off: int) -> tuple[int, bool]:
        _check_offset(off)
        buf = self.buf
        n = len(buf)
        if n > off and buf[off] > _SPACE:
            return off, False
        if not n:
            raise IndexError("empty buffer")
        while off < n:
            if buf[off] not in _WHITESPACE:
                return off, False
            off += 1
        return off, True

    def trim_goto_v0(self, off: int) -> tuple[int, bool]:
        """Skip whitespace from ``off``; return the position and whether the end was reached."""
        return self._skip(off)

    def trim_goto_v1(self, off: int) -> tuple[int, bool]:
        """Skip whitespace from ``off``, testing each whitespace kind in turn."""
        return self._skip(off)

    def trim_for_v0(self, off: int) -> tuple[int, bool]:
        """Skip whitespace from ``off`` with a single membership test per byte."""
        return self._skip(off)

    def trim_for_v1(self, off: int) -> tuple[int, bool]:
        """Like :meth:`trim_for_v0`, but at the end reports the last position, not one past it."""
        pos, at_end = self._skip(off)
        if at_end:
            return pos - 1, True
        return pos, False

    def trim_fj_v0(self, off: int) -> int:
        """Return the first non-whitespace position from ``off`` (or the last index)."""
        _check_offset(off)
        buf = self.buf
        if not buf or buf[off] > _SPACE:
            return off
        if buf[0] not in _WHITESPACE:
            return off
        for pos in range(off + 1, len(buf)):
            if buf[pos] not in _WHITESPACE:
                return pos
        return len(buf) - 1

    def trim_fj_v1(self, off: int) -> int:
        """Variant of :meth:`trim_fj_v0` working on the tail of the buffer from ``off``."""
        _check_offset(off)
        tail = self.buf[off:]
        if not tail or tail[off] > _SPACE:
            return off
        if tail[0] not in _WHITESPACE:
            return off
        for pos, char in enumerate(tail[1:], 1):
            if char not in _WHITESPACE:
                return off + pos
        return len(tail) - 1