from intkern.core.width import wrap_signed
from intkern.kernels.base import IntegerKernel
from intkern.kernels.fibonacci import fibonacci
from intkern.kernels.models import IntKind


class UnsignedKernel(IntegerKernel):
    def __init__(self, kind: IntKind) -> None:
        if kind.signed:
            raise ValueError(
                f"{kind.name}: UnsignedKernel needs an unsigned kind"
            )
        super().__init__(kind)

    def magnitude(self, value: int) -> int:
        return self.wrap(value)

    def copysign(self, target: int, source: int) -> int:
        # Every unsigned source is non-negative.
        return self.wrap(target)

    def is_2_power(self, value: int) -> bool:
        value = self.wrap(value)
        return value != 0 and (value & (value - 1)) == 0

    def sign(self, value: int) -> int:
        """1 for a non-zero value, else 0, without branching on the value."""
        value = self.wrap(value)
        shift = self.bit_size - 1
        low_bits = value & ~(1 << shift)
        negated = wrap_signed(-low_bits, self.bit_size)
        return (value >> shift) | ((negated >> shift) & 1)

    def fibonacci(self, index: int) -> int:
        return fibonacci(index, self.bit_size)
