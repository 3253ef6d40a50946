"""
Transaction Module

Immutable records of single balance-affecting events. The ledger appends
them in creation order and never updates or removes them.
"""

from decimal import Decimal
from datetime import datetime
from dataclasses import dataclass
from typing import Any, Dict
from enum import Enum


class TransactionKind(Enum):
    """Direction of a transaction relative to its account"""
    CREDIT = "credit"  # Increases the balance
    DEBIT = "debit"    # Decreases the balance


@dataclass(frozen=True)
class Transaction:
    """
    A single credit or debit posted to one account.

    ``balance_after`` is the owning account's balance immediately after this
    transaction was applied.
    """
    transaction_id: int
    account_id: int
    kind: TransactionKind
    amount: Decimal
    description: str
    timestamp: datetime
    balance_after: Decimal

    @property
    def is_credit(self) -> bool:
        return self.kind == TransactionKind.CREDIT

    @property
    def is_debit(self) -> bool:
        return self.kind == TransactionKind.DEBIT

    @property
    def signed_amount(self) -> Decimal:
        """Amount with the sign it contributes to the balance"""
        return self.amount if self.is_credit else -self.amount

    def to_dict(self) -> Dict[str, Any]:
        """Convert to JSON-friendly dictionary"""
        return {
            "transaction_id": self.transaction_id,
            "account_id": self.account_id,
            "kind": self.kind.value,
            "amount": str(self.amount),
            "description": self.description,
            "timestamp": self.timestamp.isoformat(),
            "balance_after": str(self.balance_after),
        }
