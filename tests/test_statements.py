"""
Tests for plain-text account and statement rendering
"""

from decimal import Decimal

from simple_banking.config import BankingConfig
from simple_banking.currency import Currency
from simple_banking.ledger import Ledger
from simple_banking.statements import (
    format_account_info, format_amount, format_balances, format_statement,
    format_statement_line, RULE
)


class TestAccountInfo:

    def test_format_account_info(self, ledger):
        account_id = ledger.create_account("John Doe", Decimal('950'))
        text = format_account_info(ledger.get_account_info(account_id))

        assert text.splitlines() == [
            "--- Account Information ---",
            f"Account ID: {account_id}",
            "Customer: John Doe",
            "Balance: $950.00",
            "Created: 2025-01-15 09:30:00",
            "Status: active",
        ]

    def test_format_amount(self):
        assert format_amount(Decimal('0.1')) == "$0.10"
        assert format_amount(Decimal('-5')) == "$-5.00"


class TestStatement:

    def test_statement_layout(self, ledger):
        account_id = ledger.create_account("John Doe", Decimal('1000.00'))
        ledger.deposit(account_id, Decimal('250.00'), "Salary deposit")
        ledger.withdraw(account_id, Decimal('100.00'), "ATM withdrawal")

        lines = format_statement(ledger, account_id).splitlines()

        assert lines[0] == "--- Account Statement for John Doe ---"
        assert lines[1] == f"Account ID: {account_id}"
        assert lines[2] == "Statement Period: Last 30 days"
        assert lines[3] == "Current Balance: $1150.00"
        assert lines[5].split() == ["Date", "Trans", "ID", "Type", "Amount", "Description"]
        assert lines[6] == RULE

        rows = lines[7:]
        assert len(rows) == 3
        assert rows[0].split()[:4] == ["2025-01-15", "3", "DEBIT", "$-100.00"]
        assert rows[0].endswith("ATM withdrawal")
        assert rows[2].split()[:4] == ["2025-01-15", "1", "CREDIT", "$+1000.00"]

    def test_custom_window_in_header(self, ledger):
        account_id = ledger.create_account("John Doe", 10)
        assert "Last 7 days" in format_statement(ledger, account_id, 7)

    def test_unknown_account(self, ledger):
        assert format_statement(ledger, 1) is None

    def test_statement_line_columns(self, ledger):
        account_id = ledger.create_account("Jane Smith", Decimal('500'))
        line = format_statement_line(ledger.transactions[0])

        assert line.startswith("2025-01-15   1          CREDIT     $+500.00")
        assert line.endswith("Initial deposit")


class TestBalances:

    def test_format_balances_skips_unknown(self, ledger):
        a = ledger.create_account("A", Decimal('950.13'))
        b = ledger.create_account("B")

        assert format_balances(ledger, [a, 42, b]).splitlines() == [
            "--- Final Balances ---",
            f"Account {a}: $950.13",
            f"Account {b}: $0.00",
        ]


class TestOtherCurrencies:
    """Rendering follows the ledger's configured currency"""

    def test_format_amount_in_yen(self):
        assert format_amount(Decimal('1000'), Currency.JPY) == "¥1000"
        assert format_amount(Decimal('12.5'), Currency.EUR) == "€12.50"

    def test_statement_and_balances_in_yen(self, clock):
        ledger = Ledger(BankingConfig(currency="JPY"), clock=clock)
        account_id = ledger.create_account("Taro", Decimal('5000'))
        ledger.withdraw(account_id, Decimal('1200'))

        lines = format_statement(ledger, account_id).splitlines()
        assert lines[3] == "Current Balance: ¥3800"
        assert lines[7].split()[3] == "¥-1200"
        assert lines[8].split()[3] == "¥+5000"

        assert format_balances(ledger, [account_id]).splitlines()[1] == (
            f"Account {account_id}: ¥3800"
        )
