"""
Auction parameters - immutable pricing inputs fixed at construction.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Union

from gda.core.errors import InvalidParameters
from gda.math import fixed_point as fp

Number = Union[str, int, Decimal]


@dataclass(frozen=True)
class AuctionParameters:
    """
    Pricing parameters of a discrete GDA.

    Prices and rates are Fixed values (ints scaled by 10**18);
    start_time is whole unix seconds.

    Attributes:
        initial_price: Price of the first unit at elapsed = 0, > 0
        scale_factor: Per-unit geometric price growth, > 1
        decay_constant: Continuous time-decay rate per second, > 0
        start_time: Auction start, never mutated
    """
    initial_price: int
    scale_factor: int
    decay_constant: int
    start_time: int = 0

    def __post_init__(self):
        for name in ("initial_price", "scale_factor", "decay_constant", "start_time"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidParameters(f"{name} must be int, got {type(value).__name__}")

        if self.initial_price <= 0:
            raise InvalidParameters(f"initial_price must be > 0, got {self.initial_price}")
        # scale_factor == 1 zeroes the geometric-series denominator
        if self.scale_factor <= fp.UNIT:
            raise InvalidParameters(
                f"scale_factor must be > 1, got {fp.to_decimal(self.scale_factor)}"
            )
        if self.decay_constant <= 0:
            raise InvalidParameters(f"decay_constant must be > 0, got {self.decay_constant}")
        if self.start_time < 0:
            raise InvalidParameters(f"start_time must be >= 0, got {self.start_time}")

    @classmethod
    def from_values(
        cls,
        initial_price: Number,
        scale_factor: Number,
        decay_constant: Number,
        start_time: int = 0,
    ) -> "AuctionParameters":
        """
        Build parameters from human-readable decimals.

        Example:
            AuctionParameters.from_values("1000", "1.1", "0.5")
        """
        try:
            return cls(
                initial_price=fp.from_decimal(initial_price),
                scale_factor=fp.from_decimal(scale_factor),
                decay_constant=fp.from_decimal(decay_constant),
                start_time=start_time,
            )
        except InvalidParameters:
            raise
        except (ArithmeticError, TypeError, ValueError) as e:
            # decimal.InvalidOperation is an ArithmeticError
            raise InvalidParameters(f"Unparseable parameter: {e!r}") from e

    def describe(self) -> dict:
        """Human-readable view of the parameters."""
        return {
            "initial_price": str(fp.to_decimal(self.initial_price)),
            "scale_factor": str(fp.to_decimal(self.scale_factor)),
            "decay_constant": str(fp.to_decimal(self.decay_constant)),
            "start_time": self.start_time,
        }
