"""
Ledger - External collaborators of the auction engine.

The engine never owns units or funds. It talks to two capabilities:

1. **UnitLedger**: records which account holds which minted unit id
2. **PaymentChannel**: moves currency, used only to refund overpayment

Rollback:
--------
A failed purchase undoes its mints through ``UnitLedger.burn``, the
compensating action for ``mint``. Refunds are the last step of a
purchase, so a successful ``pay`` is never undone.

The in-memory implementations below back the CLI demo and the tests.
"""

from typing import Dict, Hashable, List, Optional, Protocol, Set, runtime_checkable

from gda.utils.logger import get_logger

logger = get_logger("ledger")


# =============================================================================
# Protocols
# =============================================================================


@runtime_checkable
class UnitLedger(Protocol):
    """Ownership ledger for sequentially numbered units."""

    def mint(self, recipient: Hashable, unit_id: int) -> None:
        ...

    def burn(self, unit_id: int) -> None:
        ...


@runtime_checkable
class PaymentChannel(Protocol):
    """Currency transfer capability."""

    def pay(self, to: Hashable, amount: int) -> bool:
        ...


# =============================================================================
# In-Memory Implementations
# =============================================================================


class InMemoryUnitLedger:
    """
    Dict-backed unit ownership ledger.

    Attributes:
        owners: Mapping of unit_id to owner
    """

    def __init__(self):
        self.owners: Dict[int, Hashable] = {}

    def mint(self, recipient: Hashable, unit_id: int) -> None:
        if unit_id in self.owners:
            raise ValueError(f"Unit {unit_id} already minted")
        self.owners[unit_id] = recipient
        logger.debug(f"Minted unit {unit_id} to {recipient!r}")

    def burn(self, unit_id: int) -> None:
        if unit_id not in self.owners:
            raise KeyError(f"Unit {unit_id} not minted")
        del self.owners[unit_id]
        logger.debug(f"Burned unit {unit_id}")

    def owner_of(self, unit_id: int) -> Optional[Hashable]:
        return self.owners.get(unit_id)

    def balance_of(self, owner: Hashable) -> int:
        return sum(1 for holder in self.owners.values() if holder == owner)

    def units_of(self, owner: Hashable) -> List[int]:
        return sorted(uid for uid, holder in self.owners.items() if holder == owner)

    @property
    def total_supply(self) -> int:
        return len(self.owners)


class InMemoryPaymentChannel:
    """
    Currency channel paying refunds out of a reserve.

    ``pay`` returns False instead of raising when the reserve cannot
    cover the amount or the recipient refuses funds, mirroring a failed
    low-level value transfer.
    """

    def __init__(self, reserve: int = 0):
        self.reserve = reserve
        self.balances: Dict[Hashable, int] = {}
        self.refusing: Set[Hashable] = set()

    def deposit(self, amount: int) -> None:
        """Add funds to the reserve (e.g. incoming payments)."""
        if amount < 0:
            raise ValueError(f"Deposit must be non-negative, got {amount}")
        self.reserve += amount

    def refuse(self, address: Hashable) -> None:
        """Make every future transfer to ``address`` fail."""
        self.refusing.add(address)

    def pay(self, to: Hashable, amount: int) -> bool:
        if amount < 0 or amount > self.reserve or to in self.refusing:
            logger.debug(f"Transfer of {amount} to {to!r} failed")
            return False
        self.reserve -= amount
        self.balances[to] = self.balances.get(to, 0) + amount
        return True

    def balance_of(self, address: Hashable) -> int:
        return self.balances.get(address, 0)
