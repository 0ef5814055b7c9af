"""Word repositories built from bilingual dictionary dumps."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterator

SEPARATOR = b"|"
TRIM_CHARS = " \":!#%&'~?.*+-<=>¿".encode()

REPLACEMENTS: tuple[bytes, ...] = tuple(
    marker.encode()
    for marker in (
        "prep:",
        "noun:",
        "part:",
        "phrase:",
        "phrs:",
        "phrz:",
        "art:",
        "pron:",
        "art:",
        "rep:",
        "inf:",
        "inf :",
        "fem :",
        "plu :",
        "inan :",
        "auxv:",
        "sin :",
        "plu :",
        "inf :",
        "masc :",
        "neu :",
        "pro:",
        "name:",
        "informal :",
        "infor :",
        "past :",
        "pres. 2ps :",
        "initial form :",
        "past passive participle :",
    )
)

_LEADING_NUMBER = re.compile(rb"[0-9$]+")
_HEADER_LINES = 3


class Repo:
    """A de-duplicated collection of words for one language."""

    def __init__(self, language: str = "") -> None:
        self.language = language
        self._words: set[bytes] = set()

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[bytes]:
        return iter(self.entries())

    def add(self, text: bytes) -> None:
        """Split ``text`` on ``|`` and store every new, meaningful word."""
        if not text:
            return
        for part in bytes(text).split(SEPARATOR):
            word = part.strip(TRIM_CHARS)
            if not word or _LEADING_NUMBER.match(word):
                continue
            self._words.add(word)

    def entries(self) -> list[bytes]:
        """Return the stored words in byte order."""
        return sorted(self._words)

    def flush(self, filename: str | Path) -> None:
        """Write the sorted words to ``filename``, one per line, replacing it."""
        path = Path(filename)
        path.unlink(missing_ok=True)
        with path.open("wb") as fh:
            for word in self.entries():
                fh.write(word)
                fh.write(b"\n")

    def reset(self) -> None:
        """Forget the language and every stored word."""
        self.language = ""
        self._words.clear()


def clean(text: bytes) -> bytes:
    """Blank out bracketed notes and markers and turn list separators into ``|``."""
    out = bytearray()
    depth = 0
    for char in bytes(text):
        if char == ord("("):
            depth += 1
        elif char == ord(")"):
            depth = max(depth - 1, 0)
        if depth > 0 or char in b")@":
            char = ord(" ")
        elif char in b",/;:":
            char = ord("|")
        out.append(char)

    result = bytes(out).strip(b" ").strip(b":")
    for marker in REPLACEMENTS:
        pos = result.find(marker)
        if pos != -1:
            result = result[:pos] + b" " * len(marker) + result[pos + len(marker):]
    return result


def scan(dst: Repo, dst_en: Repo, filename: str | Path, reverse: bool = False) -> None:
    """Feed the ``left|right`` lines of a dictionary file into two repositories.

    The first three lines are a header. With ``reverse`` the right column
    belongs to ``dst`` and the left one to ``dst_en``.
    """
    with open(filename, "rb") as fh:
        for number, raw in enumerate(fh):
            if number < _HEADER_LINES:
                continue
            line = raw.removesuffix(b"\n").removesuffix(b"\r")
            sep = line.find(SEPARATOR)
            if sep == -1 or sep == len(line) - 1:
                continue
            left = clean(line[:sep].strip(b"@"))
            right = clean(line[sep + 1:].strip(b"@"))
            if reverse:
                dst.add(right)
                dst_en.add(left)
            else:
                dst.add(left)
                dst_en.add(right)