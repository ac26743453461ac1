"""Helpers for fixed-width two's-complement and unsigned integer arithmetic."""

import sys

NATIVE_BITS = sys.maxsize.bit_length() + 1


def mask_for_width(width_bits: int) -> int:
    return (1 << width_bits) - 1


def signed_bounds(width_bits: int) -> tuple[int, int]:
    return (-(1 << (width_bits - 1)), (1 << (width_bits - 1)) - 1)


def unsigned_bounds(width_bits: int) -> tuple[int, int]:
    return (0, mask_for_width(width_bits))


def wrap_signed(value: int, width_bits: int) -> int:
    """Wrap an integer into signed ``width_bits`` range."""
    half = 1 << (width_bits - 1)
    return ((value + half) & mask_for_width(width_bits)) - half


def wrap_unsigned(value: int, width_bits: int) -> int:
    """Wrap an integer into unsigned ``width_bits`` range."""
    return value & mask_for_width(width_bits)


def trunc_divmod(dividend: int, divisor: int) -> tuple[int, int]:
    """Divide truncating toward zero; the remainder takes the dividend's sign.

    Python's ``//`` floors, so the quotient is built from magnitudes and
    the remainder recovered from it. Raises ``ZeroDivisionError`` on a zero
    divisor.
    """
    quotient = abs(dividend) // abs(divisor)
    if (dividend < 0) != (divisor < 0):
        quotient = -quotient
    return quotient, dividend - quotient * divisor
