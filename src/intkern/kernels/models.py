from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from intkern.core.width import (
    NATIVE_BITS,
    mask_for_width,
    signed_bounds,
    unsigned_bounds,
    wrap_signed,
)

MAX_KIND_BITS = 1024


class KindName(str, Enum):
    U8 = "u8"
    U16 = "u16"
    U32 = "u32"
    U64 = "u64"
    UX = "ux"
    I8 = "i8"
    I16 = "i16"
    I32 = "i32"
    I64 = "i64"
    IX = "ix"


class IntKind(BaseModel):
    """A fixed-width integer representation: bit width plus signedness."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    bits: int = Field(ge=1, le=MAX_KIND_BITS)
    signed: bool

    @model_validator(mode="before")
    @classmethod
    def validate_input_bits(cls, data: Any) -> Any:
        if isinstance(data, dict) and isinstance(data.get("bits"), bool):
            raise ValueError("bits: bool is not allowed for a bit width")
        return data

    @model_validator(mode="after")
    def validate_signed_width(self) -> "IntKind":
        if self.signed and self.bits < 2:
            raise ValueError("signed kinds need at least 2 bits")
        return self

    @property
    def size(self) -> int:
        return (self.bits + 7) >> 3

    @property
    def bit_size(self) -> int:
        return self.bits

    @property
    def mask(self) -> int:
        return mask_for_width(self.bits)

    @property
    def minimal(self) -> int:
        if self.signed:
            return signed_bounds(self.bits)[0]
        return unsigned_bounds(self.bits)[0]

    @property
    def maximal(self) -> int:
        if self.signed:
            return signed_bounds(self.bits)[1]
        return unsigned_bounds(self.bits)[1]

    @property
    def unsigned(self) -> "IntKind":
        """The unsigned kind of the same width."""
        if not self.signed:
            return self
        name = "u" + self.name[1:] if self.name.startswith("i") else self.name
        return IntKind(name=name, bits=self.bits, signed=False)

    def wrap(self, value: int) -> int:
        if self.signed:
            return wrap_signed(value, self.bits)
        return value & self.mask


_KIND_WIDTHS: dict[KindName, tuple[int, bool]] = {
    KindName.U8: (8, False),
    KindName.U16: (16, False),
    KindName.U32: (32, False),
    KindName.U64: (64, False),
    KindName.UX: (NATIVE_BITS, False),
    KindName.I8: (8, True),
    KindName.I16: (16, True),
    KindName.I32: (32, True),
    KindName.I64: (64, True),
    KindName.IX: (NATIVE_BITS, True),
}


def builtin_kind(name: KindName) -> IntKind:
    bits, signed = _KIND_WIDTHS[name]
    return IntKind(name=name.value, bits=bits, signed=signed)
