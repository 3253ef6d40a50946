"""
Banking demonstration driver.

Opens three accounts, moves money between them, prints account details and a
statement, then posts a day of interest and prints the final balances.

Run with: python -m simple_banking
"""

from decimal import Decimal
from typing import Callable, Dict, Optional

from .config import get_config
from .ledger import Ledger
from .logging_config import setup_logging
from .statements import format_account_info, format_amount, format_balances, format_statement

DEMO_INTEREST_RATE = Decimal('0.05')


def run_demo(ledger: Optional[Ledger] = None,
             echo: Callable[[str], None] = print) -> Dict[str, int]:
    """
    Play the demo scenario against a ledger and return the account ids
    keyed by customer name.
    """
    ledger = ledger or Ledger()

    echo("=== Banking System Demo ===")
    echo("")

    accounts = {}
    for name, opening in (
        ("John Doe", Decimal('1000.00')),
        ("Jane Smith", Decimal('500.00')),
        ("Bob Johnson", Decimal('0')),
    ):
        account_id = ledger.create_account(name, opening)
        accounts[name] = account_id
        echo(f"Account created successfully. Account ID: {account_id}")
    echo("")

    john, jane, bob = accounts["John Doe"], accounts["Jane Smith"], accounts["Bob Johnson"]

    ledger.deposit(john, Decimal('250.00'), "Salary deposit")
    ledger.withdraw(john, Decimal('100.00'), "ATM withdrawal")
    ledger.deposit(bob, Decimal('300.00'), "Initial funding")

    transfer_amount = Decimal('200.00')
    if ledger.transfer(john, jane, transfer_amount, "Loan repayment"):
        echo(f"Transfer successful: {format_amount(transfer_amount, ledger.currency)} from {john} to {jane}")
    echo("")

    for account_id in (john, jane):
        account = ledger.get_account_info(account_id)
        if account is not None:
            echo(format_account_info(account, ledger.currency))
            echo("")

    statement = format_statement(ledger, john)
    if statement is not None:
        echo(statement)
    echo("")

    echo("Applying daily interest...")
    for account_id in (john, jane):
        interest = ledger.calculate_interest(account_id, DEMO_INTEREST_RATE)
        echo(f"Account {account_id}: interest {format_amount(interest, ledger.currency)}")
    echo("")

    echo(format_balances(ledger, (john, jane, bob)))
    return accounts


def main() -> None:
    config = get_config()
    setup_logging(config.log_level, fmt=config.log_format)
    run_demo(Ledger(config))


if __name__ == "__main__":
    main()
