"""Detach values from their sources by copying."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any


@dataclass
class Record:
    """A small record with an id, a cost, a name and a payload."""

    id: int = 0
    ct: float = 0.0
    nm: str = ""
    pl: bytes = b""


def copy_record(x: Any) -> Any:
    """Return a shallow copy of a :class:`Record`; anything else is returned as is."""
    if isinstance(x, Record):
        return dataclasses.replace(x)
    return x


def copy_scalar(x: Any) -> Any:
    """Return a detached copy of a scalar or byte buffer; anything else is returned as is."""
    if isinstance(x, bytearray):
        return bytearray(x)
    if isinstance(x, memoryview):
        return x.tobytes()
    return x