from datetime import date
from decimal import Decimal
from typing import TypedDict

from services.booking.domain.value_object.priced_day import PricedDay


class PricedDayDetails(TypedDict):
    """1泊分の料金の入力データ"""

    stay_date: str
    price: Decimal


class PricedDayFactory:
    """入力データから PricedDay を生成する Factory"""

    def create(self, details: PricedDayDetails) -> PricedDay:
        try:
            stay_date = date.fromisoformat(details["stay_date"])
        except ValueError as e:
            raise ValueError(f"Invalid date format: {e}") from e

        return PricedDay(stay_date=stay_date, price=details["price"])

    def create_all(self, details: list[PricedDayDetails]) -> list[PricedDay]:
        """入力順を保ったまま PricedDay のリストを生成する"""
        return [self.create(d) for d in details]
