"""
Auction - Discrete Gradual Dutch Auction engine.

Sells sequentially numbered units. The price of a batch comes from
gda.core.pricing given the units already sold and the seconds elapsed
since the auction start.

Purchase Processing:
-------------------
1. Quote the cost of the batch
2. Reject if payment < cost (nothing changes)
3. Advance num_sold
4. Mint unit ids num_sold_before+1 .. num_sold_after to the recipient
5. Refund payment - cost to the payer if positive
6. Return the change

Step 3 precedes every collaborator call, so a collaborator that calls
back into quote/purchase prices against the post-purchase count.

Atomicity:
---------
Steps 3-5 commit together or not at all. Units minted while a purchase
is in flight (its own and those of purchases nested inside it) are
journaled; on failure the failing purchase burns its slice of the
journal and restores the counters before re-raising.
"""

import time
from typing import Callable, Hashable, List, Optional

from gda.core.errors import (
    AuctionNotStarted,
    InsufficientPayment,
    InvalidParameters,
    UnableToRefund,
)
from gda.core.ledger import PaymentChannel, UnitLedger
from gda.core.parameters import AuctionParameters, Number
from gda.core.pricing import purchase_price
from gda.math import fixed_point as fp
from gda.utils.logger import get_logger
from gda.utils.validation import require, validate_amount

logger = get_logger("auction")

Clock = Callable[[], int]


def wall_clock() -> int:
    """Current unix time in whole seconds."""
    return int(time.time())


class DiscreteGDA:
    """
    Discrete GDA with a single live state.

    Attributes:
        ledger: Unit ownership collaborator (mint/burn)
        payments: Currency collaborator (refunds)
        clock: Zero-argument callable returning unix seconds
        total_revenue: Sum of costs of committed purchases
        purchase_count: Number of committed purchases
    """

    def __init__(
        self,
        params: AuctionParameters,
        ledger: UnitLedger,
        payments: PaymentChannel,
        clock: Optional[Clock] = None,
    ):
        if not isinstance(params, AuctionParameters):
            raise InvalidParameters(f"Expected AuctionParameters, got {type(params).__name__}")

        self._params = params
        self.ledger = ledger
        self.payments = payments
        self.clock = clock or wall_clock

        self._num_sold = 0
        self.total_revenue = 0
        self.purchase_count = 0

        # Unit ids minted by purchases still in flight
        self._journal: List[int] = []
        self._depth = 0

        logger.info(f"Auction created: {params.describe()}")

    @classmethod
    def create(
        cls,
        initial_price: Number,
        scale_factor: Number,
        decay_constant: Number,
        ledger: UnitLedger,
        payments: PaymentChannel,
        clock: Optional[Clock] = None,
    ) -> "DiscreteGDA":
        """Create an auction starting now, from decimal parameters."""
        clock = clock or wall_clock
        params = AuctionParameters.from_values(
            initial_price, scale_factor, decay_constant, start_time=clock()
        )
        return cls(params, ledger, payments, clock=clock)

    # =========================================================================
    # Read Surface
    # =========================================================================

    @property
    def params(self) -> AuctionParameters:
        return self._params

    @property
    def num_sold(self) -> int:
        """Units sold so far."""
        return self._num_sold

    def elapsed(self) -> int:
        """Seconds since the auction start."""
        now = self.clock()
        if now < self._params.start_time:
            raise AuctionNotStarted(now, self._params.start_time)
        return now - self._params.start_time

    def quote(self, quantity: int) -> int:
        """
        Cost of the next ``quantity`` units right now.

        Read-only.

        Returns:
            Cost in smallest currency units
        """
        cost = purchase_price(quantity, self._num_sold, self.elapsed(), self._params)
        logger.debug(f"Quote: {quantity} units after {self._num_sold} sold -> {cost}")
        return cost

    def stats(self) -> dict:
        """Get auction statistics."""
        return {
            "num_sold": self._num_sold,
            "total_revenue": self.total_revenue,
            "purchases": self.purchase_count,
            "start_time": self._params.start_time,
        }

    # =========================================================================
    # Purchase
    # =========================================================================

    def purchase(
        self,
        quantity: int,
        payment: int,
        recipient: Hashable,
        payer: Optional[Hashable] = None,
    ) -> int:
        """
        Buy ``quantity`` units for ``recipient``.

        Args:
            quantity: Units to buy
            payment: Amount offered, in smallest currency units
            recipient: Account receiving the minted units
            payer: Account receiving the change (defaults to recipient)

        Returns:
            Change refunded to the payer

        Raises:
            InsufficientPayment: payment < cost, nothing changed
            UnableToRefund: refund failed, whole purchase rolled back
        """
        require(validate_amount(payment, "payment"))
        if payer is None:
            payer = recipient

        cost = self.quote(quantity)
        if payment < cost:
            raise InsufficientPayment(cost, payment)

        before = self._num_sold
        revenue_before = self.total_revenue
        count_before = self.purchase_count
        frame = len(self._journal)

        # Advance before any external call
        self._num_sold = before + quantity
        self.total_revenue += cost
        self.purchase_count += 1
        self._depth += 1

        change = payment - cost
        try:
            for unit_id in range(before + 1, before + quantity + 1):
                self.ledger.mint(recipient, unit_id)
                self._journal.append(unit_id)

            if change > 0:
                try:
                    refunded = self.payments.pay(payer, change)
                except Exception as e:
                    raise UnableToRefund(payer, change) from e
                if not refunded:
                    raise UnableToRefund(payer, change)
        except Exception:
            self._rollback(frame, before, revenue_before, count_before)
            raise
        finally:
            self._depth -= 1
            if self._depth == 0:
                self._journal.clear()

        logger.info(
            f"Sold units {before + 1}..{before + quantity} to {recipient!r} "
            f"for {cost} ({fp.to_decimal(cost)}), change {change}"
        )
        return change

    def _rollback(self, frame: int, num_sold: int, revenue: int, purchases: int) -> None:
        """
        Restore the counters, then burn units journaled since ``frame``.

        Counters are restored first so a failing burn cannot leave
        num_sold advanced. Burn failures are logged and the remaining
        units are still burned; the caller re-raises the original error.
        """
        self._num_sold = num_sold
        self.total_revenue = revenue
        self.purchase_count = purchases

        minted = self._journal[frame:]
        del self._journal[frame:]
        stuck = []
        for unit_id in reversed(minted):
            try:
                self.ledger.burn(unit_id)
            except Exception as e:
                stuck.append(unit_id)
                logger.error(f"Rollback could not burn unit {unit_id}: {e!r}")

        logger.warning(
            f"Purchase rolled back: burned {len(minted) - len(stuck)}/{len(minted)} unit(s), "
            f"num_sold={num_sold}"
        )
