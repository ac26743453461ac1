from intkern.kernels.base import IntegerKernel
from intkern.kernels.models import IntKind


class SignedKernel(IntegerKernel):
    """Two's-complement kernel; ``abs`` and ``sign`` use sign-mask bit tricks."""

    def __init__(self, kind: IntKind) -> None:
        if not kind.signed:
            raise ValueError(f"{kind.name}: SignedKernel needs a signed kind")
        super().__init__(kind)

    def sign_bit(self, value: int) -> int:
        """-1 when ``value`` is negative, else 0."""
        return self.wrap(value) >> (self.bit_size - 1)

    def abs(self, value: int) -> int:
        """Absolute value; ``abs(minimal)`` wraps back to ``minimal``."""
        value = self.wrap(value)
        mask = self.sign_bit(value)
        return self.wrap((value ^ mask) + (mask & 1))

    def absu(self, value: int) -> int:
        """Absolute value in the unsigned kind, exact for ``minimal``."""
        value = self.wrap(value)
        mask = self.sign_bit(value)
        return self.unsigned_kind.wrap((value ^ mask) + (mask & 1))

    def magnitude(self, value: int) -> int:
        return self.absu(value)

    def copysign(self, target: int, source: int) -> int:
        target = self.wrap(target)
        if target == 0:
            return 0
        flip = self.sign_bit(target ^ self.wrap(source))
        return self.wrap((target ^ flip) + (flip & 1))

    def is_2_power(self, value: int) -> bool:
        value = self.wrap(value)
        return value > 0 and (value & (value - 1)) == 0

    def sign(self, value: int) -> int:
        value = self.wrap(value)
        return self.sign_bit(value) | (self.sign_bit(-value) & 1)
