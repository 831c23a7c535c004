"""
Shared fixtures for GDA tests.

Includes a floating-point reference oracle for the pricing formula,
used only to cross-check the fixed-point implementation.
"""

import logging
import math

import pytest

from gda.core import AuctionParameters, InMemoryPaymentChannel, InMemoryUnitLedger
from gda.utils.logger import GDALogger


# =============================================================================
# Reference Oracle
# =============================================================================


def reference_price(initial_price, scale_factor, decay_constant, num_sold, elapsed, quantity):
    """
    Price in smallest currency units, evaluated with doubles.

    initial_price is in whole currency units; the result is scaled by 1e18
    to match the fixed-point output.
    """
    num1 = initial_price * scale_factor ** num_sold
    num2 = scale_factor ** quantity - 1
    den1 = math.exp(decay_constant * elapsed)
    den2 = scale_factor - 1
    return num1 * num2 / (den1 * den2) * 1e18


class FakeClock:
    """Manually advanced clock returning whole seconds."""

    def __init__(self, now: int = 1_000):
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, seconds: int) -> None:
        self.now += seconds


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def oracle():
    """Floating-point reference implementation of the pricing formula."""
    return reference_price


@pytest.fixture
def params():
    """Standard parameters: 1000, 1.1, 0.5, starting at t=1000."""
    return AuctionParameters.from_values("1000", "1.1", "0.5", start_time=1_000)


@pytest.fixture
def clock():
    return FakeClock(1_000)


@pytest.fixture
def ledger():
    return InMemoryUnitLedger()


@pytest.fixture
def payments():
    """Payment channel with a reserve large enough for any refund."""
    return InMemoryPaymentChannel(reserve=10**30)


@pytest.fixture(autouse=True)
def reset_logging():
    """Rebind log handlers after tests that swap stderr (CLI runner)."""
    yield
    GDALogger.setup(level=logging.WARNING, force=True)
