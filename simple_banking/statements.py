"""
Statement Rendering Module

Plain-text views of accounts and their transactions for console output.
Amounts are shown with the currency symbol at the currency's precision.
"""

from decimal import Decimal
from typing import Iterable, List, Optional

from .accounts import Account
from .currency import Currency
from .ledger import Ledger
from .transactions import Transaction

STATEMENT_COLUMNS = ("Date", "Trans ID", "Type", "Amount", "Description")
RULE = "-" * 80


def format_amount(amount: Decimal, currency: Currency = Currency.USD) -> str:
    return currency.format(amount)


def format_account_info(account: Account, currency: Currency = Currency.USD) -> str:
    lines = [
        "--- Account Information ---",
        f"Account ID: {account.account_id}",
        f"Customer: {account.customer_name}",
        f"Balance: {format_amount(account.balance, currency)}",
        f"Created: {account.created_at:%Y-%m-%d %H:%M:%S}",
        f"Status: {account.status.value}",
    ]
    return "\n".join(lines)


def format_statement_line(txn: Transaction, currency: Currency = Currency.USD) -> str:
    return "{:<12} {:<10} {:<10} {:<15} {:<30}".format(
        txn.timestamp.strftime("%Y-%m-%d"),
        txn.transaction_id,
        txn.kind.value.upper(),
        currency.format(txn.signed_amount, signed=True),
        txn.description,
    ).rstrip()


def format_statement(ledger: Ledger, account_id: int,
                     window_days: Optional[int] = None) -> Optional[str]:
    """
    Render a statement for one account, most recent transaction first.

    Returns None if the account does not exist.
    """
    if window_days is None:
        window_days = ledger.config.default_statement_days

    account = ledger.get_account_info(account_id)
    if account is None:
        return None

    lines: List[str] = [
        f"--- Account Statement for {account.customer_name} ---",
        f"Account ID: {account_id}",
        f"Statement Period: Last {window_days} days",
        f"Current Balance: {format_amount(account.balance, ledger.currency)}",
        "",
        "{:<12} {:<10} {:<10} {:<15} {:<30}".format(*STATEMENT_COLUMNS).rstrip(),
        RULE,
    ]
    lines.extend(
        format_statement_line(txn, ledger.currency)
        for txn in ledger.generate_statement(account_id, window_days)
    )
    return "\n".join(lines)


def format_balances(ledger: Ledger, account_ids: Iterable[int]) -> str:
    """One "Account <id>: <balance>" line per existing account"""
    lines = ["--- Final Balances ---"]
    for account_id in account_ids:
        balance = ledger.get_balance(account_id)
        if balance is not None:
            lines.append(f"Account {account_id}: {format_amount(balance, ledger.currency)}")
    return "\n".join(lines)
