"""Checked integer arithmetic matching the ledger host's fixed-width integers"""

from gig_lending.domain.constants import I128_MIN, I128_MAX, U64_MAX
from gig_lending.domain.exceptions import ArithmeticOverflowError


def _check_i128(value: int, operation: str) -> int:
    if value < I128_MIN or value > I128_MAX:
        raise ArithmeticOverflowError(f"Arithmetic overflow in {operation}")
    return value


def checked_add(a: int, b: int) -> int:
    """Add two signed 128-bit amounts"""
    return _check_i128(a + b, "addition")


def checked_sub(a: int, b: int) -> int:
    """Subtract two signed 128-bit amounts"""
    return _check_i128(a - b, "subtraction")


def checked_mul(a: int, b: int) -> int:
    """Multiply two signed 128-bit amounts"""
    return _check_i128(a * b, "multiplication")


def truncating_div(a: int, b: int) -> int:
    """
    Integer division rounding toward zero.

    Python's // floors, which differs from the host for negative operands:
    -7 // 2 == -4, truncating_div(-7, 2) == -3.
    """
    if b == 0:
        raise ArithmeticOverflowError("Division by zero")
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def checked_add_u64(a: int, b: int) -> int:
    """Add two unsigned 64-bit values (counters, timestamps)"""
    result = a + b
    if result < 0 or result > U64_MAX:
        raise ArithmeticOverflowError("Arithmetic overflow in u64 addition")
    return result
