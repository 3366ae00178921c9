from typing import Optional

from services.booking.domain.factory import PricedDayDetails, PricedDayFactory
from services.booking.domain.service import PricingService
from services.booking.domain.value_object import BookingPrice, HomestayId


class QuoteBookingPriceService:
    """予約料金の見積もりユースケース"""

    def __init__(
        self,
        pricing_service: PricingService,
        factory: PricedDayFactory,
    ) -> None:
        self._pricing_service = pricing_service
        self._factory = factory

    def quote(
        self,
        days: list[PricedDayDetails],
        homestay_id: Optional[HomestayId] = None,
    ) -> BookingPrice:
        """宿泊各日の料金から料金内訳を見積もる

        Returns:
            BookingPrice: 料金内訳（Handler層でレスポンス形式に変換する）
        """
        # 1. Factory で値オブジェクトを生成
        priced_days = self._factory.create_all(days)

        # 2. ドメインサービスで計算
        return self._pricing_service.calculate(priced_days, homestay_id)
