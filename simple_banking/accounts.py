"""
Account Module

Account records held by the ledger. Only the balance changes after creation,
and only through transaction processing.
"""

from decimal import Decimal
from datetime import datetime
from dataclasses import dataclass, replace
from typing import Any, Dict
from enum import Enum


class AccountStatus(Enum):
    """Account lifecycle states"""
    ACTIVE = "active"


@dataclass
class Account:
    """Customer account with a running balance"""
    account_id: int
    customer_name: str
    balance: Decimal
    created_at: datetime
    status: AccountStatus = AccountStatus.ACTIVE

    @property
    def is_active(self) -> bool:
        return self.status == AccountStatus.ACTIVE

    def can_debit(self, amount: Decimal) -> bool:
        """Check whether a debit would keep the balance at or above zero"""
        return amount <= self.balance

    def snapshot(self) -> 'Account':
        """Detached copy safe to hand to callers"""
        return replace(self)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to JSON-friendly dictionary"""
        return {
            "account_id": self.account_id,
            "customer_name": self.customer_name,
            "balance": str(self.balance),
            "created_at": self.created_at.isoformat(),
            "status": self.status.value,
        }
