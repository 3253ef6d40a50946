"""
Transaction endpoints

Account existence is checked first (404); any remaining failure of a debit
is an insufficient-funds rejection (422).
"""

from fastapi import APIRouter, Depends, HTTPException, status

from .dependencies import get_ledger, require_account
from .schemas import DepositRequest, WithdrawRequest, TransferRequest
from ..ledger import Ledger


router = APIRouter()


def _insufficient_funds(account_id: int) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        detail=f"Insufficient funds in account {account_id}"
    )


@router.post("/deposit")
async def deposit(request: DepositRequest, ledger: Ledger = Depends(get_ledger)):
    """Make a deposit"""
    require_account(ledger, request.account_id)
    if not ledger.deposit(request.account_id, request.amount, request.description):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Deposit rejected")

    return {
        "success": True,
        "balance": str(ledger.get_balance(request.account_id)),
        "message": "Deposit processed successfully"
    }


@router.post("/withdraw")
async def withdraw(request: WithdrawRequest, ledger: Ledger = Depends(get_ledger)):
    """Make a withdrawal"""
    require_account(ledger, request.account_id)
    if not ledger.withdraw(request.account_id, request.amount, request.description):
        raise _insufficient_funds(request.account_id)

    return {
        "success": True,
        "balance": str(ledger.get_balance(request.account_id)),
        "message": "Withdrawal processed successfully"
    }


@router.post("/transfer")
async def transfer(request: TransferRequest, ledger: Ledger = Depends(get_ledger)):
    """Make a transfer between accounts"""
    require_account(ledger, request.from_account_id)
    require_account(ledger, request.to_account_id)
    if request.from_account_id == request.to_account_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Cannot transfer to the same account"
        )

    if not ledger.transfer(
        request.from_account_id, request.to_account_id,
        request.amount, request.description
    ):
        raise _insufficient_funds(request.from_account_id)

    return {
        "success": True,
        "from_balance": str(ledger.get_balance(request.from_account_id)),
        "to_balance": str(ledger.get_balance(request.to_account_id)),
        "message": "Transfer processed successfully"
    }
