"""Descriptor model naming the CRC-15 algorithm's fixed parameters."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from crc15.constants import (
    BYTE_SHIFT,
    CRC15_CHECK,
    CRC15_INIT,
    CRC15_POLY,
    CRC15_WIDTH,
    REGISTER_WIDTH,
)
from crc15.crc import crc15

CHECK_INPUT = b"123456789"


class CrcParameters(BaseModel):
    """Identity of a CRC variant.

    Computation never reads these values back; the model exists so the
    constants can be validated, logged and compared as a unit. Changing any
    field yields a different checksum and needs a new ``name``.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    width: int = Field(gt=0)
    register_width: int = Field(gt=8)
    poly: int = Field(ge=0)
    init: int = Field(ge=0)
    byte_shift: int = Field(ge=0)
    check: int = Field(ge=0)

    @model_validator(mode="after")
    def fits_register(self) -> CrcParameters:
        if self.width >= self.register_width:
            raise ValueError(
                f"width {self.width} must be narrower than the {self.register_width}-bit register"
            )
        limit = 1 << self.register_width
        for field in ("poly", "init", "check"):
            value = getattr(self, field)
            if value >= limit:
                raise ValueError(f"{field} 0x{value:X} does not fit a {self.register_width}-bit register")
        if self.byte_shift != self.register_width - 1 - 8:
            raise ValueError(
                f"byte_shift {self.byte_shift} must align the input byte below the top register bit"
            )
        return self

    def describe(self) -> str:
        return (
            f"{self.name}: width={self.width} register={self.register_width} "
            f"poly=0x{self.poly:04X} init=0x{self.init:04X} check=0x{self.check:04X}"
        )

    def verify_check(self) -> bool:
        """Recompute the check value over ``b"123456789"`` and compare."""
        return crc15(CHECK_INPUT) == self.check


CRC15_PARAMETERS = CrcParameters(
    name="crc-15",
    width=CRC15_WIDTH,
    register_width=REGISTER_WIDTH,
    poly=CRC15_POLY,
    init=CRC15_INIT,
    byte_shift=BYTE_SHIFT,
    check=CRC15_CHECK,
)
