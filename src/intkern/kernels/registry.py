"""Maps kind names to kernel instances."""

import logging

from intkern.kernels.base import IntegerKernel
from intkern.kernels.models import IntKind, KindName, builtin_kind
from intkern.kernels.signed import SignedKernel
from intkern.kernels.unsigned import UnsignedKernel

_LOGGER = logging.getLogger(__name__)


def build_kernel(kind: IntKind) -> IntegerKernel:
    """Return a kernel bound to ``kind``, signed or unsigned as it requires."""
    _LOGGER.debug(
        "building kernel for %s (%d bits, signed=%s)",
        kind.name,
        kind.bits,
        kind.signed,
    )
    if kind.signed:
        return SignedKernel(kind)
    return UnsignedKernel(kind)


_KERNELS: dict[KindName, IntegerKernel] = {
    name: build_kernel(builtin_kind(name)) for name in KindName
}


def _parse_kind_name(name: str | KindName) -> KindName:
    try:
        return KindName(name)
    except ValueError:
        valid = ", ".join(k.value for k in KindName)
        raise ValueError(
            f"Unknown integer kind '{name}'. Valid kinds: {valid}"
        ) from None


def available_kinds() -> list[KindName]:
    return list(KindName)


def get_kind(name: str | KindName) -> IntKind:
    return _KERNELS[_parse_kind_name(name)].kind


def get_kernel(name: str | KindName) -> IntegerKernel:
    """Return the shared kernel for a built-in kind name such as ``"u8"``."""
    return _KERNELS[_parse_kind_name(name)]
