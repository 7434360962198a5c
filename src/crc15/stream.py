"""Incremental CRC-15 accumulator with a hashlib-like interface."""

from __future__ import annotations

from typing import Iterable

from crc15.constants import CRC15_INIT
from crc15.crc import crc15_update


class Crc15:
    """Accumulates CRC-15 state across any number of ``update`` calls.

    Splitting the input across calls never changes the result:
    ``Crc15().update(a).update(b).value == crc15(a + b)``.
    """

    name = "crc-15"
    digest_size = 2

    def __init__(self, data: bytes | bytearray | memoryview | Iterable[int] = b"") -> None:
        self.value = CRC15_INIT
        if data:
            self.update(data)

    def update(self, data: bytes | bytearray | memoryview | Iterable[int]) -> Crc15:
        self.value = crc15_update(self.value, data)
        return self

    def reset(self) -> None:
        self.value = CRC15_INIT

    def digest(self) -> bytes:
        return self.value.to_bytes(self.digest_size, "big")

    def hexdigest(self) -> str:
        return f"{self.value:04x}"

    def copy(self) -> Crc15:
        other = Crc15()
        other.value = self.value
        return other

    def __repr__(self) -> str:
        return f"Crc15(value=0x{self.value:04X})"
