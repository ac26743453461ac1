"""Operations shared by every integer kind.

A kernel is bound to one :class:`IntKind` and wraps each integer argument
into that kind before computing, so results follow the kind's native modular
arithmetic. No operation checks for overflow.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence

from intkern.core.errors import IntegerDivisionByZeroError
from intkern.core.folds import (
    EMPTY_FOLD,
    EMPTY_MIN_MAX,
    CheckedFold,
    CheckedMinMax,
    fold_max,
    fold_min,
    fold_min_max,
)
from intkern.core.width import NATIVE_BITS, trunc_divmod, wrap_unsigned
from intkern.kernels.models import IntKind


class IntegerKernel(ABC):
    def __init__(self, kind: IntKind) -> None:
        self.kind = kind
        self.unsigned_kind = kind.unsigned

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind.name!r})"

    @property
    def size(self) -> int:
        return self.kind.size

    @property
    def bit_size(self) -> int:
        return self.kind.bit_size

    @property
    def minimal(self) -> int:
        return self.kind.minimal

    @property
    def maximal(self) -> int:
        return self.kind.maximal

    @property
    def signed(self) -> bool:
        return self.kind.signed

    def wrap(self, value: int) -> int:
        return self.kind.wrap(value)

    def _wrap_all(self, values: Iterable[int]) -> list[int]:
        return [self.kind.wrap(value) for value in values]

    @abstractmethod
    def magnitude(self, value: int) -> int:
        """Absolute value in the unsigned counterpart of the kind."""

    @abstractmethod
    def sign(self, value: int) -> int: ...

    @abstractmethod
    def is_2_power(self, value: int) -> bool: ...

    @abstractmethod
    def copysign(self, target: int, source: int) -> int: ...

    def divmod(self, dividend: int, divisor: int) -> tuple[int, int]:
        """Quotient and remainder, truncating toward zero."""
        dividend = self.wrap(dividend)
        divisor = self.wrap(divisor)
        if divisor == 0:
            raise IntegerDivisionByZeroError(self.kind.name, dividend)
        quotient, remainder = trunc_divmod(dividend, divisor)
        return self.wrap(quotient), self.wrap(remainder)

    def gcd(self, value_0: int, value_1: int) -> int:
        value_0 = self.wrap(value_0)
        value_1 = self.wrap(value_1)
        while value_1 != 0:
            value_0, value_1 = value_1, trunc_divmod(value_0, value_1)[1]
        return self.magnitude(value_0)

    def lcm(self, value_0: int, value_1: int) -> int:
        value_0 = self.wrap(value_0)
        value_1 = self.wrap(value_1)
        if value_0 == 0 or value_1 == 0:
            return 0
        # Divide first so the intermediate stays within the kind.
        reduced = self.magnitude(value_0) // self.gcd(value_0, value_1)
        return self.unsigned_kind.wrap(reduced * self.magnitude(value_1))

    def is_odd(self, value: int) -> bool:
        return (self.wrap(value) & 1) != 0

    def min(self, value_0: int, value_1: int) -> int:
        value_0 = self.wrap(value_0)
        value_1 = self.wrap(value_1)
        if value_0 < value_1:
            return value_0
        return value_1

    def max(self, value_0: int, value_1: int) -> int:
        value_0 = self.wrap(value_0)
        value_1 = self.wrap(value_1)
        if value_0 > value_1:
            return value_0
        return value_1

    def mins(self, value: int, *values: int) -> int:
        return fold_min(self._wrap_all((value, *values)))

    def maxs(self, value: int, *values: int) -> int:
        return fold_max(self._wrap_all((value, *values)))

    def min_slice(self, values: Sequence[int]) -> int:
        return fold_min(self._wrap_all(values), "min_slice")

    def max_slice(self, values: Sequence[int]) -> int:
        return fold_max(self._wrap_all(values), "max_slice")

    def min_slice_checked(self, values: Sequence[int]) -> CheckedFold:
        if not values:
            return EMPTY_FOLD
        return CheckedFold(fold_min(self._wrap_all(values)), False)

    def max_slice_checked(self, values: Sequence[int]) -> CheckedFold:
        if not values:
            return EMPTY_FOLD
        return CheckedFold(fold_max(self._wrap_all(values)), False)

    def min_max(self, value_0: int, value_1: int) -> tuple[int, int]:
        value_0 = self.wrap(value_0)
        value_1 = self.wrap(value_1)
        if value_0 < value_1:
            return value_0, value_1
        return value_1, value_0

    def min_maxs(self, value: int, *values: int) -> tuple[int, int]:
        return fold_min_max(self._wrap_all((value, *values)))

    def min_max_slice(self, values: Sequence[int]) -> tuple[int, int]:
        return fold_min_max(self._wrap_all(values), "min_max_slice")

    def min_max_slice_checked(self, values: Sequence[int]) -> CheckedMinMax:
        if not values:
            return EMPTY_MIN_MAX
        low, high = fold_min_max(self._wrap_all(values))
        return CheckedMinMax(low, high, False)

    def pow(self, base: int, exponent: int) -> int:
        """Raise ``base`` to ``exponent`` by square-and-multiply.

        ``exponent`` is a native unsigned value. ``pow(0, 0) == 1``.
        """
        power = self.wrap(1)
        base = self.wrap(base)
        exponent = wrap_unsigned(exponent, NATIVE_BITS)
        while exponent > 0:
            if exponent & 1:
                power = self.wrap(power * base)
            base = self.wrap(base * base)
            exponent >>= 1
        return power
