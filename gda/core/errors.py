"""
Auction errors.

Every failure surfaces synchronously to the caller of construction,
quote or purchase. Fixed-point failures (ArithmeticOverflow,
DivisionByZero, DomainError) live in gda.math.fixed_point and pass
through the engine unchanged.
"""


class AuctionError(Exception):
    """Base class for auction failures."""


class InvalidParameters(AuctionError, ValueError):
    """Auction parameters rejected at construction."""


class AuctionNotStarted(AuctionError):
    """Clock reads earlier than the auction start time."""

    def __init__(self, now: int, start_time: int):
        self.now = now
        self.start_time = start_time
        super().__init__(f"Auction starts at {start_time}, clock reads {now}")


class InsufficientPayment(AuctionError):
    """Payment below the quoted cost. No state was changed."""

    def __init__(self, cost: int, payment: int):
        self.cost = cost
        self.payment = payment
        super().__init__(f"Insufficient payment: cost {cost}, paid {payment}")


class UnableToRefund(AuctionError):
    """Refund of overpayment failed. The whole purchase was rolled back."""

    def __init__(self, payer, amount: int):
        self.payer = payer
        self.amount = amount
        super().__init__(f"Unable to refund {amount} to {payer!r}")
