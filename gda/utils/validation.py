"""
Input Validation - Bounds checks for auction inputs.

Validators return ``(is_valid, error_message)`` so callers decide whether
to raise, log or report. Guards against:
- Non-integer quantities and amounts (bools included)
- Negative counts, timestamps and payments
- Quantities large enough to make pricing pointless work
"""

from typing import Any, Tuple

# =============================================================================
# Constants
# =============================================================================

MIN_AMOUNT = 0
MAX_AMOUNT = 2**256 - 1
MAX_QUANTITY = 2**32 - 1
MAX_TIMESTAMP = 2**64 - 1


# =============================================================================
# Validation Functions
# =============================================================================


def validate_integer(
    value: Any,
    name: str,
    min_val: int = MIN_AMOUNT,
    max_val: int = MAX_AMOUNT,
) -> Tuple[bool, str]:
    """
    Validate integer within bounds.

    Args:
        value: Value to validate
        name: Field name for errors
        min_val: Minimum allowed value
        max_val: Maximum allowed value

    Returns:
        (is_valid, error_message)
    """
    if isinstance(value, bool) or not isinstance(value, int):
        return False, f"{name} must be int, got {type(value).__name__}"

    if value < min_val:
        return False, f"{name} must be >= {min_val}, got {value}"

    if value > max_val:
        return False, f"{name} must be <= {max_val}, got {value}"

    return True, ""


def validate_quantity(quantity: Any) -> Tuple[bool, str]:
    """Validate a number of units to price or buy."""
    return validate_integer(quantity, "quantity", 0, MAX_QUANTITY)


def validate_amount(amount: Any, name: str = "amount") -> Tuple[bool, str]:
    """Validate a currency amount in smallest units."""
    return validate_integer(amount, name, MIN_AMOUNT, MAX_AMOUNT)


def validate_timestamp(timestamp: Any, name: str = "timestamp") -> Tuple[bool, str]:
    """Validate a unix timestamp or elapsed seconds."""
    return validate_integer(timestamp, name, 0, MAX_TIMESTAMP)


def require(result: Tuple[bool, str]) -> None:
    """Raise ValueError for a failed validation result."""
    valid, err = result
    if not valid:
        raise ValueError(err)


# =============================================================================
# Module Exports
# =============================================================================

__all__ = [
    "validate_integer",
    "validate_quantity",
    "validate_amount",
    "validate_timestamp",
    "require",
    "MAX_AMOUNT",
    "MAX_QUANTITY",
    "MAX_TIMESTAMP",
]
