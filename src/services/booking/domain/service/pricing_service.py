from decimal import Decimal, localcontext
from typing import Optional, Sequence

from services.booking.domain.service.discount_policy import DiscountPolicy
from services.booking.domain.value_object.booking_price import (
    EXACT_CONTEXT,
    BookingPrice,
)
from services.booking.domain.value_object.homestay_id import HomestayId
from services.booking.domain.value_object.priced_day import PricedDay


class PricingService:
    """予約料金を計算するドメインサービス

    1泊ごとの料金を合計して小計を求め、割引額の算出は
    DiscountPolicy に委譲する。状態を持たず、例外は捕捉しない。
    """

    def __init__(self, discount_policy: DiscountPolicy) -> None:
        self._discount_policy = discount_policy

    def calculate(
        self,
        days: Sequence[PricedDay],
        homestay: Optional[HomestayId] = None,
    ) -> BookingPrice:
        """料金内訳を計算する

        Args:
            days: 宿泊する各日の料金（空でもよい）
            homestay: 宿泊施設。施設別の料金ルール用に予約しており、計算には使わない

        Returns:
            BookingPrice: 小計・割引・合計（通貨は USD 固定）
        """
        nights = len(days)

        with localcontext(EXACT_CONTEXT):
            subtotal = Decimal("0")
            for day in days:
                subtotal += day.price

        # 割引ポリシーは呼び出し側のコンテキストで計算させる
        discount = self._discount_policy.get_discount_amount(subtotal, nights)

        return BookingPrice.of(subtotal, discount)
