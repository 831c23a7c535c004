"""
Pricing - Discrete GDA purchase price in fixed-point arithmetic.

The cost of buying ``q`` units after ``n`` have been sold, ``t`` seconds
after the auction started:

    price = p0 * s^n * (s^q - 1) / (e^(k*t) * (s - 1))

- p0 * s^n: starting price raised by the growth already used up
- (s^q - 1) / (s - 1): geometric series over the q units in the batch
- e^(k*t): continuous decay with elapsed time

Every step runs through gda.math.fixed_point. initial_price carries the
10**18 scale, so the raw Fixed quotient is already a count of smallest
currency units and is returned without rescaling.
"""

from gda.core.parameters import AuctionParameters
from gda.math import fixed_point as fp
from gda.utils.validation import require, validate_integer, validate_quantity, validate_timestamp


def purchase_price(
    quantity: int,
    num_sold: int,
    elapsed: int,
    params: AuctionParameters,
) -> int:
    """
    Total cost of the next ``quantity`` units.

    Args:
        quantity: Units to buy (0 costs 0)
        num_sold: Units already sold
        elapsed: Whole seconds since the auction start
        params: Auction parameters

    Returns:
        Cost in smallest currency units (truncated)

    Raises:
        ArithmeticOverflow: if an intermediate value leaves the Fixed range
        ValueError: on negative or non-integer inputs
    """
    require(validate_quantity(quantity))
    require(validate_integer(num_sold, "num_sold"))
    require(validate_timestamp(elapsed, "elapsed"))

    if quantity == 0:
        return 0

    scale = params.scale_factor
    num1 = fp.mul(params.initial_price, fp.pow(scale, fp.from_int(num_sold)))
    num2 = fp.sub(fp.pow(scale, fp.from_int(quantity)), fp.UNIT)
    den1 = fp.exp(fp.mul(params.decay_constant, fp.from_int(elapsed)))
    den2 = fp.sub(scale, fp.UNIT)

    return fp.div(fp.mul(num1, num2), fp.mul(den1, den2))


def unit_price(num_sold: int, elapsed: int, params: AuctionParameters) -> int:
    """Cost of the single next unit."""
    return purchase_price(1, num_sold, elapsed, params)
