from intkern.core.width import NATIVE_BITS, wrap_unsigned


def fibonacci(index: int, width_bits: int = NATIVE_BITS) -> int:
    """Fibonacci number ``index`` modulo ``2**width_bits``.

    - fibonacci(0) == 0
    - fibonacci(1) == fibonacci(2) == 1
    - fibonacci(3) == 2

    The matrix ((1, 1), (1, 0)) is raised to the ``index`` power by repeated
    squaring, so the cost is O(log index) matrix products.
    """
    index = wrap_unsigned(index, NATIVE_BITS)
    v0, v1 = 0, 1
    m00, m01, m10, m11 = 1, 1, 1, 0
    while index > 0:
        if index & 1:
            v0, v1 = (
                wrap_unsigned(v0 * m00 + v1 * m10, width_bits),
                wrap_unsigned(v0 * m01 + v1 * m11, width_bits),
            )
        m00, m01, m10, m11 = (
            wrap_unsigned(m00 * m00 + m01 * m10, width_bits),
            wrap_unsigned(m00 * m01 + m01 * m11, width_bits),
            wrap_unsigned(m10 * m00 + m11 * m10, width_bits),
            wrap_unsigned(m10 * m01 + m11 * m11, width_bits),
        )
        index >>= 1
    return v0
