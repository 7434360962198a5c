"""15-bit CRC (poly 0x4599, init 0x7FFF) over a 16-bit register."""

from __future__ import annotations

from typing import Iterable

from crc15.constants import (
    BYTE_SHIFT,
    CRC15_INIT,
    CRC15_POLY,
    CRC15_TOP_BIT,
    REGISTER_MASK,
)


def crc15_update(crc: int, data: bytes | bytearray | memoryview | Iterable[int]) -> int:
    """Feed data into an existing CRC register and return the new register.

    Passing the result of a previous call lets a message be checksummed in
    pieces: ``crc15_update(crc15(a), b) == crc15(a + b)``.

    Memoryviews are read as raw bytes whatever their item format. Ints from
    other iterables must be in ``0..255``; this is not checked, and higher
    bits are dropped by the register shifts.
    """
    if isinstance(data, memoryview):
        data = data.cast("B")
    for byte in data:
        crc ^= byte << BYTE_SHIFT
        for _ in range(8):
            crc = (crc << 1) & REGISTER_MASK
            if crc & CRC15_TOP_BIT:
                crc ^= CRC15_POLY
    return crc


def crc15(
    data: bytes | bytearray | memoryview | Iterable[int],
    start: int = 0,
    end: int | None = None,
) -> int:
    """Compute the CRC-15 of ``data[start:end]``.

    Bounds count bytes, also for memoryviews with wider items.
    The full 16-bit register is returned as-is; bit 15 is not cleared.
    Bounds are not checked, out-of-range values follow slice semantics.
    """
    if start or end is not None:
        if not isinstance(data, (bytes, bytearray, memoryview)):
            data = bytes(data)
        data = memoryview(data).cast("B")[start:end]
    return crc15_update(CRC15_INIT, data)


def crc15_bytes(
    data: bytes | bytearray | memoryview | Iterable[int],
    start: int = 0,
    end: int | None = None,
    byteorder: str = "big",
) -> bytes:
    """Compute the CRC-15 of ``data[start:end]`` and return the register as 2 bytes."""
    return crc15(data, start, end).to_bytes(2, byteorder)
