from decimal import ROUND_HALF_UP, Decimal

from services.booking.domain.service.discount_policy import DiscountPolicy

CENT = Decimal("0.01")


class LengthOfStayDiscountPolicy(DiscountPolicy):
    """長期滞在割引ポリシー

    宿泊数が閾値以上なら小計に割引率を掛けた額を割り引く。
    月割（monthly）が週割（weekly）より優先される。
    割引額はセント単位に四捨五入する。
    """

    def __init__(
        self,
        weekly_rate: Decimal = Decimal("0"),
        monthly_rate: Decimal = Decimal("0"),
        weekly_min_nights: int = 7,
        monthly_min_nights: int = 28,
    ) -> None:
        for name, rate in (
            ("weekly_rate", weekly_rate),
            ("monthly_rate", monthly_rate),
        ):
            if not Decimal("0") <= rate < Decimal("1"):
                raise ValueError(f"{name} must be between 0 and 1: {rate}")
        if weekly_min_nights < 1:
            raise ValueError("weekly_min_nights must be at least 1")
        if monthly_min_nights < weekly_min_nights:
            raise ValueError(
                "monthly_min_nights must not be less than weekly_min_nights"
            )

        self._weekly_rate = weekly_rate
        self._monthly_rate = monthly_rate
        self._weekly_min_nights = weekly_min_nights
        self._monthly_min_nights = monthly_min_nights

    def get_discount_amount(self, subtotal: Decimal, nights: int) -> Decimal:
        rate = self.rate_for(nights)
        if not rate:
            return Decimal("0")

        amount = (subtotal * rate).quantize(CENT, rounding=ROUND_HALF_UP)
        if not amount:
            # -0.00 を返さない
            return Decimal("0")
        return -amount

    def rate_for(self, nights: int) -> Decimal:
        """宿泊数に対して適用される割引率"""
        if nights >= self._monthly_min_nights and self._monthly_rate > 0:
            return self._monthly_rate
        if nights >= self._weekly_min_nights and self._weekly_rate > 0:
            return self._weekly_rate
        return Decimal("0")
