"""
Fixed-Point - Signed 59.18-decimal fixed-point arithmetic for GDA pricing.

A Fixed value is a plain Python int holding ``real * 10**18``. The
representable range is that of a signed 256-bit word; every operation
checks its result against that range and raises instead of wrapping or
saturating.

All computations are integer-only for:
- Determinism (identical results on every platform and interpreter)
- Reproducibility against on-chain style 18-decimal implementations

exp and ln are evaluated at 36 fractional digits after range reduction
by ln(2) and truncated once to 18 digits.
"""

from decimal import Decimal, ROUND_DOWN, localcontext
from typing import Union


# =============================================================================
# Constants
# =============================================================================

# One whole unit (1.0)
UNIT = 10**18

# Signed 256-bit bounds
MAX_FIXED = 2**255 - 1
MIN_FIXED = -(2**255)

# exp(x) overflows MAX_FIXED above this input
EXP_MAX_INPUT = 133_084258667509499440

# exp(x) truncates to zero below this input
EXP_MIN_INPUT = -41_446531673892822322

# Internal precision for exp/ln (36 fractional digits)
_WIDE = 10**36

# ln(2) to 36 fractional digits
_LN2_WIDE = 693147180559945309417232121458176568

# Decimal context precision for parsing (int256 has 78 digits)
_DECIMAL_PREC = 80


# =============================================================================
# Errors
# =============================================================================


class FixedPointError(ArithmeticError):
    """Base class for fixed-point failures."""


class ArithmeticOverflow(FixedPointError, OverflowError):
    """Result does not fit the signed 256-bit representation."""


class DivisionByZero(FixedPointError, ZeroDivisionError):
    """Division by a zero Fixed value."""


class DomainError(FixedPointError, ValueError):
    """Input outside the mathematical domain of the function."""


# =============================================================================
# Helpers
# =============================================================================


def _check(value: int) -> int:
    if value > MAX_FIXED or value < MIN_FIXED:
        raise ArithmeticOverflow(f"Fixed value out of range: {value}")
    return value


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return -q if (a < 0) != (b < 0) else q


def _shift(value: int, bits: int) -> int:
    return value >> bits if bits >= 0 else value << -bits


# =============================================================================
# Conversion
# =============================================================================


def from_int(n: int) -> int:
    """Convert a whole number to Fixed (exact)."""
    return _check(n * UNIT)


def from_decimal(value: Union[str, int, Decimal]) -> int:
    """
    Parse a decimal number to Fixed.

    Digits past the 18th fractional place are truncated toward zero.

    Args:
        value: String, int or Decimal (floats are rejected, they are not exact)

    Returns:
        Fixed value
    """
    if isinstance(value, float):
        raise TypeError("Use a string or Decimal, not float, to build a Fixed value")
    # Wide enough for any int256 value; digits beyond it only ever truncate
    with localcontext() as ctx:
        ctx.prec = _DECIMAL_PREC
        ctx.rounding = ROUND_DOWN
        scaled = Decimal(value) * UNIT
        return _check(int(scaled.to_integral_value(rounding=ROUND_DOWN)))


def to_decimal(x: int) -> Decimal:
    """Exact Decimal view of a Fixed value (display only)."""
    return Decimal(x) / Decimal(UNIT)


def to_int(x: int) -> int:
    """Truncate a Fixed value toward zero to whole units."""
    return _trunc_div(x, UNIT)


# =============================================================================
# Basic Arithmetic
# =============================================================================


def add(a: int, b: int) -> int:
    return _check(a + b)


def sub(a: int, b: int) -> int:
    return _check(a - b)


def mul(a: int, b: int) -> int:
    """
    Multiply two Fixed values.

    result = (a * b) / UNIT, one truncating division at full precision.
    """
    return _check(_trunc_div(a * b, UNIT))


def div(a: int, b: int) -> int:
    """
    Divide two Fixed values.

    result = (a * UNIT) / b, truncating.

    Raises:
        DivisionByZero: if b == 0
    """
    if b == 0:
        raise DivisionByZero("Fixed division by zero")
    return _check(_trunc_div(a * UNIT, b))


# =============================================================================
# Transcendental Functions
# =============================================================================


def exp(x: int) -> int:
    """
    Natural exponential e^x.

    Inputs below EXP_MIN_INPUT return 0, inputs above EXP_MAX_INPUT raise.

    Raises:
        ArithmeticOverflow: if x > EXP_MAX_INPUT
    """
    _check(x)
    if x > EXP_MAX_INPUT:
        raise ArithmeticOverflow(f"exp input too large: {x}")
    if x < EXP_MIN_INPUT:
        return 0

    # x = k*ln2 + r, 0 <= r < ln2
    wide = x * UNIT
    k = wide // _LN2_WIDE
    r = wide - k * _LN2_WIDE

    total = _WIDE
    term = _WIDE
    n = 1
    while term:
        term = term * r // (_WIDE * n)
        total += term
        n += 1

    if k >= 0:
        return _check((total << k) // UNIT)
    return total // (UNIT << -k)


def ln(x: int) -> int:
    """
    Natural logarithm.

    Raises:
        DomainError: if x <= 0
    """
    _check(x)
    if x <= 0:
        raise DomainError(f"ln undefined for non-positive input: {x}")

    # x = m * 2^k, 1 <= m < 2
    wide = x * UNIT
    k = wide.bit_length() - _WIDE.bit_length()
    m = _shift(wide, k)
    while m < _WIDE:
        k -= 1
        m = _shift(wide, k)
    while m >= 2 * _WIDE:
        k += 1
        m = _shift(wide, k)

    # ln(m) = 2 * atanh((m - 1) / (m + 1))
    z = (m - _WIDE) * _WIDE // (m + _WIDE)
    z_squared = z * z // _WIDE
    series = 0
    term = z
    n = 1
    while term:
        series += term // n
        term = term * z_squared // _WIDE
        n += 2

    return _check(_trunc_div(k * _LN2_WIDE + 2 * series, UNIT))


def powu(base: int, n: int) -> int:
    """
    Raise a Fixed base to a non-negative integer power.

    Square-and-multiply; every step is a truncating mul.
    """
    if n < 0:
        raise DomainError(f"powu exponent must be non-negative: {n}")
    result = base if n & 1 else UNIT
    n >>= 1
    while n:
        base = mul(base, base)
        if n & 1:
            result = mul(result, base)
        n >>= 1
    return result


def pow(base: int, exponent: int) -> int:
    """
    Real-valued power base^exponent for non-negative base.

    Whole non-negative exponents are computed exactly with powu;
    everything else as exp(exponent * ln(base)).

    Raises:
        DomainError: if base < 0
    """
    if base < 0:
        raise DomainError(f"pow undefined for negative base: {base}")
    if exponent == 0:
        return UNIT
    if base == 0:
        if exponent < 0:
            raise DivisionByZero("zero base with negative exponent")
        return 0
    if exponent > 0 and exponent % UNIT == 0:
        return powu(base, exponent // UNIT)
    return exp(mul(exponent, ln(base)))


__all__ = [
    "UNIT",
    "MAX_FIXED",
    "MIN_FIXED",
    "EXP_MAX_INPUT",
    "EXP_MIN_INPUT",
    "FixedPointError",
    "ArithmeticOverflow",
    "DivisionByZero",
    "DomainError",
    "from_int",
    "from_decimal",
    "to_decimal",
    "to_int",
    "add",
    "sub",
    "mul",
    "div",
    "exp",
    "ln",
    "powu",
    "pow",
]
