"""
Currency and Money Module

Holds the ledger currency and an immutable Money value with proper Decimal
precision. Floats never take part in monetary arithmetic.
"""

from decimal import Decimal, ROUND_HALF_UP, InvalidOperation, getcontext
from dataclasses import dataclass
from enum import Enum
from typing import Union

# High precision for intermediate results (interest rates etc.)
getcontext().prec = 28

Numeric = Union[Decimal, int, float, str]


class Currency(Enum):
    """ISO 4217 Currency Codes with precision info"""
    USD = ("USD", 2, "$")  # US Dollar, 2 decimal places
    EUR = ("EUR", 2, "€")  # Euro, 2 decimal places
    GBP = ("GBP", 2, "£")  # British Pound, 2 decimal places
    JPY = ("JPY", 0, "¥")  # Japanese Yen, 0 decimal places

    def __init__(self, code: str, precision: int, symbol: str):
        self.code = code
        self.precision = precision
        self.symbol = symbol

    @property
    def quantum(self) -> Decimal:
        """Smallest representable unit, e.g. Decimal('0.01')"""
        return Decimal(1).scaleb(-self.precision)

    def format(self, amount: Decimal, signed: bool = False) -> str:
        """Symbol-prefixed amount at currency precision, e.g. '$950.13'"""
        sign = "+" if signed else ""
        return f"{self.symbol}{amount:{sign}.{self.precision}f}"


def to_decimal(value: Numeric) -> Decimal:
    """
    Convert a number to Decimal without going through binary float

    Raises:
        ValueError: If the value is not a finite number
    """
    if isinstance(value, bool):
        raise ValueError("Boolean is not a monetary amount")
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation:
            raise ValueError(f"Cannot convert {value!r} to Decimal") from None
    if not result.is_finite():
        raise ValueError(f"Amount must be finite, got {value!r}")
    return result


def validate_decimal_precision(value: Decimal, currency: Currency) -> Decimal:
    """
    Round a decimal to currency precision

    Raises:
        ValueError: If the rounded value needs more digits than the context allows
    """
    try:
        return value.quantize(currency.quantum, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        raise ValueError(f"Amount {value} is too large") from None


@dataclass(frozen=True)
class Money:
    """
    Immutable money representation with currency and proper precision.
    The amount is always rounded to the currency precision.
    """
    amount: Decimal
    currency: Currency = Currency.USD

    def __post_init__(self):
        object.__setattr__(
            self, 'amount',
            validate_decimal_precision(to_decimal(self.amount), self.currency)
        )

    def is_positive(self) -> bool:
        return self.amount > Decimal('0')

    def is_negative(self) -> bool:
        return self.amount < Decimal('0')

    def to_string(self) -> str:
        """Format for display, e.g. 'USD 1,150.00'"""
        return f"{self.currency.code} {self.amount:,.{self.currency.precision}f}"
