"""
Account endpoints
"""

from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query, status

from .dependencies import get_ledger, require_account
from .schemas import (
    AccountResponse, CreateAccountRequest, InterestRequest, StatementResponse
)
from ..ledger import Ledger


router = APIRouter()


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_account(
    request: CreateAccountRequest,
    ledger: Ledger = Depends(get_ledger)
):
    """Open a new account"""
    try:
        account_id = ledger.create_account(request.customer_name, request.initial_deposit)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))

    return {
        "account_id": account_id,
        "message": "Account created successfully"
    }


@router.get("/{account_id}", response_model=AccountResponse)
async def get_account(account_id: int, ledger: Ledger = Depends(get_ledger)):
    """Get account details"""
    return require_account(ledger, account_id).to_dict()


@router.get("/{account_id}/balance")
async def get_balance(account_id: int, ledger: Ledger = Depends(get_ledger)):
    """Get current balance"""
    account = require_account(ledger, account_id)
    return {"account_id": account_id, "balance": str(account.balance)}


@router.get("/{account_id}/statement", response_model=StatementResponse)
async def get_statement(
    account_id: int,
    days: Optional[int] = Query(None, ge=0, description="Window in days; omit for the configured default"),
    full_history: bool = False,
    ledger: Ledger = Depends(get_ledger)
):
    """Get transactions for an account, most recent first"""
    require_account(ledger, account_id)

    window_days = None if full_history else (
        days if days is not None else ledger.config.default_statement_days
    )
    transactions = ledger.generate_statement(account_id, window_days, full_history=full_history)
    return {
        "account_id": account_id,
        "window_days": window_days,
        "transactions": [txn.to_dict() for txn in transactions]
    }


@router.post("/{account_id}/interest")
async def apply_interest(
    account_id: int,
    request: InterestRequest,
    ledger: Ledger = Depends(get_ledger)
):
    """Post one day of simple interest"""
    require_account(ledger, account_id)
    interest = ledger.calculate_interest(account_id, request.annual_rate)
    return {
        "account_id": account_id,
        "interest": str(interest),
        "balance": str(ledger.get_balance(account_id))
    }
