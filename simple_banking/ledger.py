"""
Ledger Module

Owns every account and the append-only transaction journal. Deposits,
withdrawals, transfers and interest postings all flow through a single
internal apply step, so each account balance always equals the signed sum
of its transactions.

Public operations never raise for business failures: unknown accounts,
insufficient funds and invalid amounts are logged and reported through the
return value (False, None, an empty statement, or zero interest).
"""

from decimal import Decimal
from datetime import datetime, timezone, timedelta
from typing import Callable, Dict, List, Optional, Tuple
import threading

from .accounts import Account
from .config import BankingConfig, get_config
from .currency import Currency, Money, Numeric, to_decimal
from .exceptions import (
    LedgerError, AccountNotFoundError, InsufficientFundsError, InvalidAmountError
)
from .logging_config import get_logger, log_action
from .transactions import Transaction, TransactionKind


Clock = Callable[[], datetime]

INITIAL_DEPOSIT_DESCRIPTION = "Initial deposit"
DEPOSIT_DESCRIPTION = "Deposit"
WITHDRAWAL_DESCRIPTION = "Withdrawal"
INTEREST_DESCRIPTION = "Daily interest payment"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Ledger:
    """
    In-memory bookkeeping for accounts and their transactions.

    All operations are serialized behind one re-entrant lock, so the ledger
    behaves exactly like single-threaded code even when shared between
    threads.
    """

    def __init__(
        self,
        config: Optional[BankingConfig] = None,
        clock: Optional[Clock] = None
    ):
        self.config = config or get_config()
        self.currency = Currency[self.config.currency.upper()]
        self._clock = clock or utc_now
        self._accounts: Dict[int, Account] = {}
        self._transactions: List[Transaction] = []
        self._next_account_id = self.config.account_id_start
        self._next_transaction_id = 1
        self._lock = threading.RLock()
        self.logger = get_logger("simple_banking.ledger")

    # ------------------------------------------------------------------
    # Read helpers

    def __len__(self) -> int:
        return len(self._accounts)

    def __contains__(self, account_id: object) -> bool:
        return account_id in self._accounts

    @property
    def transactions(self) -> Tuple[Transaction, ...]:
        """Full journal in the order transactions were recorded"""
        with self._lock:
            return tuple(self._transactions)

    def account_ids(self) -> List[int]:
        """Account ids in creation order"""
        with self._lock:
            return list(self._accounts)

    def total_balance(self) -> Decimal:
        """Sum of all account balances"""
        with self._lock:
            return sum((a.balance for a in self._accounts.values()), Decimal('0'))

    # ------------------------------------------------------------------
    # Account operations

    def create_account(self, customer_name: str, initial_deposit: Numeric = 0) -> int:
        """
        Open a new account and return its id.

        A positive initial deposit is recorded as a credit transaction
        described as "Initial deposit".

        Raises:
            InvalidAmountError: If the initial deposit is negative or not a
                representable amount
        """
        opening = self._money(initial_deposit)
        if opening.is_negative():
            raise InvalidAmountError(initial_deposit, "Initial deposit cannot be negative")

        with self._lock:
            account_id = self._next_account_id
            self._next_account_id += 1

            self._accounts[account_id] = Account(
                account_id=account_id,
                customer_name=customer_name,
                balance=Decimal('0').quantize(self.currency.quantum),
                created_at=self._clock(),
            )
            log_action(
                self.logger, "info", f"Account created: {account_id}",
                action="create_account", resource=f"account:{account_id}",
                extra={"customer_name": customer_name, "initial_deposit": str(opening.amount)}
            )

            if opening.is_positive():
                self._apply_transaction(
                    account_id, TransactionKind.CREDIT, opening.amount,
                    INITIAL_DEPOSIT_DESCRIPTION
                )

        return account_id

    def get_balance(self, account_id: int) -> Optional[Decimal]:
        """Current balance, or None if the account does not exist"""
        with self._lock:
            account = self._accounts.get(account_id)
            if account is None:
                self._reject("get_balance", AccountNotFoundError(account_id))
                return None
            return account.balance

    def get_account_info(self, account_id: int) -> Optional[Account]:
        """Snapshot of the account's current fields, or None if absent"""
        with self._lock:
            account = self._accounts.get(account_id)
            if account is None:
                self._reject("get_account_info", AccountNotFoundError(account_id))
                return None
            return account.snapshot()

    # ------------------------------------------------------------------
    # Transaction operations

    def deposit(self, account_id: int, amount: Numeric,
                description: Optional[str] = None) -> bool:
        """Credit an account. Returns False without mutation on failure."""
        try:
            with self._lock:
                value = self._positive_amount(amount)
                self._apply_transaction(
                    account_id, TransactionKind.CREDIT, value,
                    description or DEPOSIT_DESCRIPTION
                )
        except LedgerError as e:
            self._reject("deposit", e)
            return False
        return True

    def withdraw(self, account_id: int, amount: Numeric,
                 description: Optional[str] = None) -> bool:
        """Debit an account if it holds enough funds."""
        try:
            with self._lock:
                value = self._positive_amount(amount)
                account = self._require_account(account_id)
                self._check_funds(account, value)
                self._apply_transaction(
                    account_id, TransactionKind.DEBIT, value,
                    description or WITHDRAWAL_DESCRIPTION
                )
        except LedgerError as e:
            self._reject("withdraw", e)
            return False
        return True

    def transfer(self, from_account_id: int, to_account_id: int, amount: Numeric,
                 description: Optional[str] = None) -> bool:
        """
        Move funds between two accounts.

        Both legs are validated before either is applied, and both are
        applied under the ledger lock: the debit on the source is always
        followed by the matching credit on the destination.
        """
        try:
            with self._lock:
                value = self._positive_amount(amount)
                source = self._require_account(from_account_id)
                self._require_account(to_account_id)
                if from_account_id == to_account_id:
                    raise InvalidAmountError(
                        amount, f"Cannot transfer account {from_account_id} to itself"
                    )
                self._check_funds(source, value)

                self._apply_transaction(
                    from_account_id, TransactionKind.DEBIT, value,
                    description or f"Transfer to account {to_account_id}"
                )
                self._apply_transaction(
                    to_account_id, TransactionKind.CREDIT, value,
                    description or f"Transfer from account {from_account_id}"
                )
        except LedgerError as e:
            self._reject("transfer", e)
            return False

        log_action(
            self.logger, "info",
            f"Transfer successful: {Money(value, self.currency).to_string()} "
            f"from {from_account_id} to {to_account_id}",
            action="transfer", resource=f"account:{from_account_id}",
            extra={"to_account_id": to_account_id, "amount": str(value)}
        )
        return True

    def generate_statement(self, account_id: int,
                           window_days: Optional[int] = None,
                           full_history: bool = False) -> List[Transaction]:
        """
        Transactions for one account, most recent first.

        Only transactions recorded within the last ``window_days`` days are
        included, defaulting to the configured statement period;
        ``full_history=True`` disables the window. Unknown accounts produce
        an empty statement.
        """
        if window_days is None:
            window_days = self.config.default_statement_days

        with self._lock:
            if account_id not in self._accounts:
                self._reject("generate_statement", AccountNotFoundError(account_id))
                return []

            cutoff = None
            if not full_history:
                cutoff = self._clock() - timedelta(days=window_days)

            return [
                txn for txn in reversed(self._transactions)
                if txn.account_id == account_id
                and (cutoff is None or txn.timestamp >= cutoff)
            ]

    def calculate_interest(self, account_id: int,
                           annual_rate: Optional[Numeric] = None) -> Decimal:
        """
        Post one day of simple interest on the current balance.

        daily rate = annual rate / days in year. Interest is rounded to the
        currency precision; a positive result is deposited as "Daily interest
        payment" and returned. Otherwise nothing is posted and zero is
        returned.
        """
        if annual_rate is None:
            annual_rate = self.config.default_annual_rate
        zero = Decimal('0').quantize(self.currency.quantum)

        with self._lock:
            account = self._accounts.get(account_id)
            if account is None:
                self._reject("calculate_interest", AccountNotFoundError(account_id))
                return zero

            try:
                daily_rate = to_decimal(annual_rate) / Decimal(self.config.days_in_year)
                interest = Money(account.balance * daily_rate, self.currency)
            except ValueError:
                self._reject(
                    "calculate_interest",
                    InvalidAmountError(annual_rate, "Interest rate is not a number")
                )
                return zero

            if not interest.is_positive():
                return zero

            self.deposit(account_id, interest.amount, INTEREST_DESCRIPTION)
            return interest.amount

    # ------------------------------------------------------------------
    # Internals

    def _apply_transaction(self, account_id: int, kind: TransactionKind,
                           amount: Decimal, description: str) -> Transaction:
        """
        Mutate the balance and append the journal row.

        No floor check happens here; debit paths validate funds first.

        Raises:
            AccountNotFoundError: If the account does not exist
        """
        account = self._require_account(account_id)

        if kind == TransactionKind.CREDIT:
            account.balance += amount
        else:
            account.balance -= amount

        transaction = Transaction(
            transaction_id=self._next_transaction_id,
            account_id=account_id,
            kind=kind,
            amount=amount,
            description=description,
            timestamp=self._clock(),
            balance_after=account.balance,
        )
        self._next_transaction_id += 1
        self._transactions.append(transaction)

        log_action(
            self.logger, "info",
            f"Transaction successful: {kind.value} "
            f"{Money(amount, self.currency).to_string()} - {description}",
            action=f"{kind.value}_posted", resource=f"account:{account_id}",
            extra={
                "transaction_id": transaction.transaction_id,
                "amount": str(amount),
                "balance_after": str(account.balance),
            }
        )
        return transaction

    def _require_account(self, account_id: int) -> Account:
        account = self._accounts.get(account_id)
        if account is None:
            raise AccountNotFoundError(account_id)
        return account

    @staticmethod
    def _check_funds(account: Account, amount: Decimal) -> None:
        if not account.can_debit(amount):
            raise InsufficientFundsError(account.account_id, account.balance, amount)

    def _money(self, value: Numeric) -> Money:
        try:
            return Money(to_decimal(value), self.currency)
        except ValueError:
            raise InvalidAmountError(value, "Amount is not a number") from None

    def _positive_amount(self, value: Numeric) -> Decimal:
        money = self._money(value)
        if not money.is_positive():
            raise InvalidAmountError(value)
        return money.amount

    def _reject(self, operation: str, error: LedgerError) -> None:
        account_id = getattr(error, 'account_id', None)
        log_action(
            self.logger, "warning", f"{operation} failed: {error}",
            action=operation,
            resource=f"account:{account_id}" if account_id is not None else None,
            extra=error.to_dict()
        )
