from datetime import date, timedelta
from decimal import Decimal

import pytest

from services.booking.domain.value_object.priced_day import PricedDay


@pytest.fixture
def create_priced_days():
    """PricedDay のリストを生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        prices: list[str],
        start: date = date(2024, 1, 1),
    ) -> list[PricedDay]:
        return [
            PricedDay(stay_date=start + timedelta(days=i), price=Decimal(price))
            for i, price in enumerate(prices)
        ]

    return _factory
