from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from services.booking.domain.factory import PricedDayDetails
from services.shared.utils import to_decimal


class PricedDayRequest(BaseModel):
    """1泊分の料金のリクエストモデル"""

    stay_date: str = Field(
        ...,
        pattern=r"^\d{4}-\d{2}-\d{2}$",
        description="宿泊日（YYYY-MM-DD形式）",
        examples=["2024-01-01"],
    )
    price: Decimal = Field(
        ...,
        ge=0,
        max_digits=12,
        decimal_places=2,
        description="1泊の料金（小数点以下2桁まで）",
    )

    @field_validator("price", mode="before")
    @classmethod
    def convert_price_to_decimal(cls, v: object) -> Decimal:
        return to_decimal(v)


class QuoteBookingPriceRequest(BaseModel):
    """予約料金見積もりリクエストモデル"""

    homestay_id: Optional[str] = Field(default=None, min_length=1)
    days: list[PricedDayRequest] = Field(default_factory=list)

    def to_priced_day_details(self) -> list[PricedDayDetails]:
        return [
            {"stay_date": day.stay_date, "price": day.price} for day in self.days
        ]
