"""
Unit tests for the in-memory auction collaborators.

Tests cover:
1. Unit minting, burning and ownership queries
2. Refund transfers, reserve accounting and refusals
3. Protocol conformance
"""

import pytest

from gda.core import (
    InMemoryPaymentChannel,
    InMemoryUnitLedger,
    PaymentChannel,
    UnitLedger,
)


class TestInMemoryUnitLedger:
    """Tests for unit ownership."""

    def test_mint_records_owner(self, ledger):
        ledger.mint("alice", 1)
        ledger.mint("bob", 2)
        ledger.mint("alice", 3)

        assert ledger.owner_of(1) == "alice"
        assert ledger.units_of("alice") == [1, 3]
        assert ledger.balance_of("bob") == 1
        assert ledger.total_supply == 3

    def test_duplicate_mint_rejected(self, ledger):
        ledger.mint("alice", 1)
        with pytest.raises(ValueError):
            ledger.mint("bob", 1)
        assert ledger.owner_of(1) == "alice"

    def test_burn_removes_unit(self, ledger):
        ledger.mint("alice", 1)
        ledger.burn(1)
        assert ledger.owner_of(1) is None
        assert ledger.total_supply == 0

    def test_burn_unknown_unit(self, ledger):
        with pytest.raises(KeyError):
            ledger.burn(42)

    def test_satisfies_protocol(self, ledger):
        assert isinstance(ledger, UnitLedger)


class TestInMemoryPaymentChannel:
    """Tests for refund transfers."""

    def test_pay_moves_funds(self):
        channel = InMemoryPaymentChannel(reserve=100)
        assert channel.pay("alice", 40)
        assert channel.balance_of("alice") == 40
        assert channel.reserve == 60

    def test_pay_fails_beyond_reserve(self):
        channel = InMemoryPaymentChannel(reserve=10)
        assert not channel.pay("alice", 11)
        assert channel.balance_of("alice") == 0
        assert channel.reserve == 10

    def test_refusing_recipient(self):
        channel = InMemoryPaymentChannel(reserve=100)
        channel.refuse("alice")
        assert not channel.pay("alice", 1)
        assert channel.pay("bob", 1)

    def test_deposit(self):
        channel = InMemoryPaymentChannel()
        channel.deposit(50)
        assert channel.reserve == 50
        with pytest.raises(ValueError):
            channel.deposit(-1)

    def test_satisfies_protocol(self, payments):
        assert isinstance(payments, PaymentChannel)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
