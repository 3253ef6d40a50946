"""
Simple Banking

In-memory bookkeeping for customer accounts: deposits, withdrawals,
transfers, statements and daily interest, with Decimal money throughout.
"""

from .accounts import Account, AccountStatus
from .exceptions import (
    LedgerError, AccountNotFoundError, InsufficientFundsError, InvalidAmountError
)
from .ledger import Ledger
from .transactions import Transaction, TransactionKind

__version__ = "1.0.0"

__all__ = [
    "Account",
    "AccountStatus",
    "AccountNotFoundError",
    "InsufficientFundsError",
    "InvalidAmountError",
    "Ledger",
    "LedgerError",
    "Transaction",
    "TransactionKind",
]
