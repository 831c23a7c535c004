"""Fixed-point arithmetic"""
from gda.math.fixed_point import (
    UNIT,
    MAX_FIXED,
    MIN_FIXED,
    FixedPointError,
    ArithmeticOverflow,
    DivisionByZero,
    DomainError,
    from_int,
    from_decimal,
    to_decimal,
    to_int,
)

__all__ = [
    "UNIT",
    "MAX_FIXED",
    "MIN_FIXED",
    "FixedPointError",
    "ArithmeticOverflow",
    "DivisionByZero",
    "DomainError",
    "from_int",
    "from_decimal",
    "to_decimal",
    "to_int",
]
