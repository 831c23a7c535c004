"""
Tests for the discrete GDA pricing formula.

These tests verify:
1. Zero quantity short-circuit
2. Monotonicity in quantity, units sold and elapsed time
3. Geometric-series structure of batch prices
4. Overflow and input validation
"""

import pytest

from gda.core import AuctionParameters, purchase_price, unit_price
from gda.math import fixed_point as fp
from gda.math.fixed_point import ArithmeticOverflow, UNIT


@pytest.fixture
def params():
    return AuctionParameters.from_values("1000", "1.1", "0.5")


class TestZeroQuantity:
    """Buying nothing costs nothing."""

    @pytest.mark.parametrize("num_sold,elapsed", [(0, 0), (5, 3), (100, 50)])
    def test_zero_quantity_is_free(self, params, num_sold, elapsed):
        assert purchase_price(0, num_sold, elapsed, params) == 0

    def test_zero_quantity_skips_exponentiation(self, params):
        """num_sold this large would overflow if it were evaluated."""
        assert purchase_price(0, 10**9, 0, params) == 0


class TestPriceShape:
    """Tests for the shape of the price curve."""

    def test_first_unit_costs_initial_price(self, params):
        assert purchase_price(1, 0, 0, params) == fp.from_int(1000)

    def test_non_decreasing_in_quantity(self, params):
        prices = [purchase_price(q, 3, 4, params) for q in range(0, 12)]
        assert prices == sorted(prices)
        assert prices[-1] > prices[1]

    def test_non_decreasing_in_num_sold(self, params):
        prices = [purchase_price(3, n, 4, params) for n in range(0, 12)]
        assert prices == sorted(prices)
        assert prices[-1] > prices[0]

    def test_non_increasing_in_elapsed(self, params):
        prices = [purchase_price(3, 2, t, params) for t in range(0, 30)]
        assert prices == sorted(prices, reverse=True)
        assert prices[0] > prices[-1]

    def test_batch_is_sum_of_units(self, params):
        """Price of 2 units equals next unit plus the one after it."""
        batch = purchase_price(2, 5, 2, params)
        single = unit_price(5, 2, params) + unit_price(6, 2, params)
        assert abs(batch - single) <= 100

    def test_each_sale_scales_unit_price(self, params):
        """One more unit sold multiplies the next price by the scale factor."""
        before = unit_price(4, 0, params)
        after = unit_price(5, 0, params)
        assert abs(after - fp.mul(before, params.scale_factor)) <= 10

    def test_decay_per_second(self, params):
        """One second divides the price by e^0.5."""
        now = unit_price(0, 0, params)
        later = unit_price(0, 1, params)
        assert abs(later - fp.div(now, fp.exp(UNIT // 2))) <= 10**4


class TestPricingErrors:
    """Tests for failure modes of the formula."""

    def test_large_num_sold_overflows(self, params):
        with pytest.raises(ArithmeticOverflow):
            purchase_price(1, 10_000, 0, params)

    def test_large_elapsed_overflows(self, params):
        """decay * elapsed beyond the exp input range is fatal, not clamped."""
        with pytest.raises(ArithmeticOverflow):
            purchase_price(1, 0, 300, params)

    @pytest.mark.parametrize(
        "quantity,num_sold,elapsed",
        [(-1, 0, 0), (1, -1, 0), (1, 0, -1), (True, 0, 0), (1.5, 0, 0)],
    )
    def test_invalid_inputs(self, params, quantity, num_sold, elapsed):
        with pytest.raises(ValueError):
            purchase_price(quantity, num_sold, elapsed, params)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
