"""Discrete GDA pricing and settlement"""
from gda.core.errors import (
    AuctionError,
    InvalidParameters,
    AuctionNotStarted,
    InsufficientPayment,
    UnableToRefund,
)
from gda.core.parameters import AuctionParameters
from gda.core.pricing import purchase_price, unit_price
from gda.core.ledger import (
    UnitLedger,
    PaymentChannel,
    InMemoryUnitLedger,
    InMemoryPaymentChannel,
)
from gda.core.auction import DiscreteGDA, wall_clock

__all__ = [
    "AuctionError",
    "InvalidParameters",
    "AuctionNotStarted",
    "InsufficientPayment",
    "UnableToRefund",
    "AuctionParameters",
    "purchase_price",
    "unit_price",
    "UnitLedger",
    "PaymentChannel",
    "InMemoryUnitLedger",
    "InMemoryPaymentChannel",
    "DiscreteGDA",
    "wall_clock",
]
