"""Fixed-width integer kernels, one shared instance per built-in kind."""

from typing import cast

from intkern.core.errors import EmptySequenceError, IntegerDivisionByZeroError
from intkern.core.folds import CheckedFold, CheckedMinMax
from intkern.kernels.base import IntegerKernel
from intkern.kernels.fibonacci import fibonacci
from intkern.kernels.models import IntKind, KindName
from intkern.kernels.registry import (
    available_kinds,
    build_kernel,
    get_kernel,
    get_kind,
)
from intkern.kernels.signed import SignedKernel
from intkern.kernels.unsigned import UnsignedKernel

u8 = cast(UnsignedKernel, get_kernel(KindName.U8))
u16 = cast(UnsignedKernel, get_kernel(KindName.U16))
u32 = cast(UnsignedKernel, get_kernel(KindName.U32))
u64 = cast(UnsignedKernel, get_kernel(KindName.U64))
ux = cast(UnsignedKernel, get_kernel(KindName.UX))
i8 = cast(SignedKernel, get_kernel(KindName.I8))
i16 = cast(SignedKernel, get_kernel(KindName.I16))
i32 = cast(SignedKernel, get_kernel(KindName.I32))
i64 = cast(SignedKernel, get_kernel(KindName.I64))
ix = cast(SignedKernel, get_kernel(KindName.IX))

__all__ = [
    "CheckedFold",
    "CheckedMinMax",
    "EmptySequenceError",
    "IntKind",
    "IntegerDivisionByZeroError",
    "IntegerKernel",
    "KindName",
    "SignedKernel",
    "UnsignedKernel",
    "available_kinds",
    "build_kernel",
    "fibonacci",
    "get_kernel",
    "get_kind",
    "i16",
    "i32",
    "i64",
    "i8",
    "ix",
    "u16",
    "u32",
    "u64",
    "u8",
    "ux",
]
