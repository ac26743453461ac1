"""Exception types raised by the integer kernels."""


class IntegerDivisionByZeroError(ZeroDivisionError):
    """Raised when a kernel divides by a (wrapped) zero divisor."""

    def __init__(self, kind_name: str, dividend: int) -> None:
        super().__init__(f"{kind_name}: division of {dividend} by zero")
        self.kind_name = kind_name
        self.dividend = dividend


class EmptySequenceError(ValueError):
    """Raised when an unchecked fold is given no elements."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"{operation}: sequence must not be empty")
        self.operation = operation
