"""
Shared request dependencies
"""

from fastapi import HTTPException, Request, status

from ..accounts import Account
from ..ledger import Ledger


def get_ledger(request: Request) -> Ledger:
    """The ledger owned by the running application"""
    return request.app.state.ledger


def require_account(ledger: Ledger, account_id: int) -> Account:
    """Account snapshot or 404"""
    account = ledger.get_account_info(account_id)
    if account is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Account {account_id} not found"
        )
    return account
