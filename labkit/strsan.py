"""Replace bytes that start invalid UTF-8 sequences."""

from __future__ import annotations

_RUNE_SELF = 0x80
_LOCB, _HICB = 0x80, 0xBF


def _lead_info(byte: int) -> tuple[int, int, int] | None:
    """Sequence size and accepted range of the second byte for a lead byte."""
    if 0xC2 <= byte <= 0xDF:
        return 2, _LOCB, _HICB
    if byte == 0xE0:
        return 3, 0xA0, _HICB
    if byte == 0xED:
        return 3, _LOCB, 0x9F
    if 0xE1 <= byte <= 0xEF:
        return 3, _LOCB, _HICB
    if byte == 0xF0:
        return 4, 0x90, _HICB
    if 0xF1 <= byte <= 0xF3:
        return 4, _LOCB, _HICB
    if byte == 0xF4:
        return 4, _LOCB, 0x8F
    return None


_LEADS = tuple(_lead_info(byte) for byte in range(256))


def _repl_byte(repl: int | bytes) -> int:
    if isinstance(repl, int):
        if not 0 <= repl <= 0xFF:
            raise ValueError(f"replacement byte out of range: {repl}")
        return repl
    if len(repl) != 1:
        raise ValueError("replacement must be a single byte")
    return repl[0]


def strsan(data: bytes, repl: int | bytes) -> bytes:
    """Return ``data`` with the lead byte of every invalid UTF-8 sequence set to ``repl``.

    A bad sequence is skipped as a whole: after a replacement the scan
    resumes after as many bytes as the lead byte announced.
    """
    buf = bytearray(data)
    replacement = _repl_byte(repl)
    n = len(buf)
    i = 0
    while i < n:
        lead = buf[i]
        if lead < _RUNE_SELF:
            i += 1
            continue
        info = _LEADS[lead]
        if info is None:
            buf[i] = replacement
            i += 1
            continue
        size, lo, hi = info
        if i + size > n:
            buf[i] = replacement
        elif not lo <= buf[i + 1] <= hi:
            buf[i] = replacement
        elif any(not _LOCB <= c <= _HICB for c in buf[i + 2:i + size]):
            buf[i] = replacement
        i += size
    return bytes(buf)