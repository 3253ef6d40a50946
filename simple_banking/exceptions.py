"""
Typed exceptions for ledger operations.

Each error carries a machine-readable ``code`` plus the structured data that
produced it, so callers can branch on the type rather than the message.
"""

from decimal import Decimal
from typing import Any, Dict


class LedgerError(ValueError):
    """Base class for recoverable ledger failures"""

    code = "ledger_error"

    def to_dict(self) -> Dict[str, Any]:
        return {"code": self.code, "message": str(self)}


class AccountNotFoundError(LedgerError):
    """Referenced account id does not exist"""

    code = "account_not_found"

    def __init__(self, account_id: int):
        self.account_id = account_id
        super().__init__(f"Account {account_id} not found")


class InsufficientFundsError(LedgerError):
    """Debit amount exceeds the current balance"""

    code = "insufficient_funds"

    def __init__(self, account_id: int, balance: Decimal, requested: Decimal):
        self.account_id = account_id
        self.balance = balance
        self.requested = requested
        super().__init__(
            f"Insufficient funds in account {account_id}: "
            f"balance {balance}, requested {requested}"
        )


class InvalidAmountError(LedgerError):
    """Amount is not a positive (or, for opening deposits, non-negative) number"""

    code = "invalid_amount"

    def __init__(self, amount: Any, reason: str = "Amount must be positive"):
        self.amount = amount
        super().__init__(f"{reason}: {amount!r}")
