"""15-bit CRC with polynomial 0x4599 over a 16-bit register."""

from crc15.crc import crc15, crc15_update, crc15_bytes
from crc15.stream import Crc15
from crc15.params import CrcParameters, CRC15_PARAMETERS
from crc15.constants import (
    CRC15_INIT,
    CRC15_POLY,
    CRC15_CHECK,
    CRC15_WIDTH,
    REGISTER_MASK,
)

__all__ = [
    "crc15",
    "crc15_update",
    "crc15_bytes",
    "Crc15",
    "CrcParameters",
    "CRC15_PARAMETERS",
    "CRC15_INIT",
    "CRC15_POLY",
    "CRC15_CHECK",
    "CRC15_WIDTH",
    "REGISTER_MASK",
]
