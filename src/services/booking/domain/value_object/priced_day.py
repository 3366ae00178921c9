from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class PricedDay:
    """料金付きの1泊分の空き枠

    Value Object として不変性を保証。
    金額は通貨を持たない素の Decimal（通貨は料金計算側で固定）。
    """

    stay_date: date
    price: Decimal

    def __post_init__(self) -> None:
        if self.price < 0:
            raise ValueError("Price cannot be negative")

    def __str__(self) -> str:
        return f"{self.stay_date.isoformat()}: {self.price}"
