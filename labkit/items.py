"""A fixed-size binary record and a structural interface check."""

from __future__ import annotations

import argparse
import struct
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

_LAYOUT = struct.Struct("<IQ")


@dataclass
class Item:
    """A 32-bit header and a 64-bit payload, stored little-endian in 12 bytes."""

    header: int = 0
    payload: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.header < 1 << 32:
            raise ValueError(f"header out of range: {self.header}")
        if not 0 <= self.payload < 1 << 64:
            raise ValueError(f"payload out of range: {self.payload}")

    def size(self) -> int:
        """Encoded size in bytes."""
        return _LAYOUT.size

    def marshal(self) -> bytes:
        """Encode the item."""
        return _LAYOUT.pack(self.header, self.payload)

    def marshal_into(self, buffer: bytearray | memoryview) -> int:
        """Encode into the start of ``buffer`` and return the number of bytes written."""
        if len(buffer) < self.size():
            raise ValueError("short buffer")
        _LAYOUT.pack_into(buffer, 0, self.header, self.payload)
        return self.size()

    @classmethod
    def unmarshal(cls, data: bytes) -> "Item":
        """Decode an item from the first 12 bytes of ``data``."""
        if len(data) < _LAYOUT.size:
            raise ValueError("unexpected EOF")
        header, payload = _LAYOUT.unpack_from(data)
        return cls(header, payload)


@runtime_checkable
class FooBar(Protocol):
    """Anything with ``foo(int)`` and ``bar(float)`` methods."""

    def foo(self, value: int) -> None: ...

    def bar(self, value: float) -> None: ...


def calc(x: Any) -> None:
    """Accept ``x`` only if it provides the :class:`FooBar` methods."""
    if not isinstance(x, FooBar):
        raise TypeError("incompatible")


@dataclass
class _FooOnly:
    calls: list[tuple[str, float]] = field(default_factory=list)

    def foo(self, value: int) -> None:
        self.calls.append(("foo", value))


@dataclass
class _FooBarImpl:
    calls: list[tuple[str, float]] = field(default_factory=list)

    def foo(self, value: int) -> None:
        self.calls.append(("foo", value))

    def bar(self, value: float) -> None:
        self.calls.append(("bar", value))


def main(argv: list[str] | None = None) -> int:
    """Check three sample objects against :class:`FooBar` and print the outcome."""
    argparse.ArgumentParser(description="Check objects against an interface.").parse_args(argv)
    for sample in (_FooOnly(), object(), _FooBarImpl()):
        try:
            calc(sample)
        except TypeError as exc:
            print(exc)
        else:
            print("<nil>")
    return 0