"""
Pydantic schemas for API requests and responses
"""

from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field


class CreateAccountRequest(BaseModel):
    customer_name: str = Field(..., min_length=1)
    initial_deposit: Decimal = Field(Decimal("0"), ge=0, max_digits=18, decimal_places=2, description="Opening balance")


class DepositRequest(BaseModel):
    account_id: int
    amount: Decimal = Field(..., gt=0, max_digits=18, decimal_places=2)
    description: Optional[str] = None


class WithdrawRequest(BaseModel):
    account_id: int
    amount: Decimal = Field(..., gt=0, max_digits=18, decimal_places=2)
    description: Optional[str] = None


class TransferRequest(BaseModel):
    from_account_id: int
    to_account_id: int
    amount: Decimal = Field(..., gt=0, max_digits=18, decimal_places=2)
    description: Optional[str] = None


class InterestRequest(BaseModel):
    annual_rate: Optional[Decimal] = Field(None, ge=0, le=1, description="e.g. 0.05 for 5%")


class AccountResponse(BaseModel):
    account_id: int
    customer_name: str
    balance: str
    created_at: str
    status: str


class TransactionResponse(BaseModel):
    transaction_id: int
    account_id: int
    kind: str
    amount: str
    description: str
    timestamp: str
    balance_after: str


class StatementResponse(BaseModel):
    account_id: int
    window_days: Optional[int]
    transactions: List[TransactionResponse]
