from __future__ import annotations

from pydantic import BaseModel

from services.booking.domain.value_object import BookingPrice


class BookingPriceData(BaseModel):
    """料金内訳のレスポンスモデル"""

    subtotal: str
    discount: str
    total_amount: str
    currency: str


class SuccessResponse(BaseModel):
    """成功レスポンスモデル"""

    status: str = "success"
    data: BookingPriceData


class ErrorResponse(BaseModel):
    """エラーレスポンスモデル"""

    status: str = "error"
    error_code: str
    message: str
    details: list | None = None


def to_response(price: BookingPrice) -> SuccessResponse:
    """BookingPrice をレスポンスモデルに変換する"""
    return SuccessResponse(
        data=BookingPriceData(
            subtotal=str(price.subtotal),
            discount=str(price.discount),
            total_amount=str(price.total_amount),
            currency=price.currency.value,
        )
    )
