from decimal import Decimal

from services.booking.domain.service.discount_policy import DiscountPolicy


class NoDiscountPolicy(DiscountPolicy):
    """割引を適用しないポリシー"""

    def get_discount_amount(self, subtotal: Decimal, nights: int) -> Decimal:
        return Decimal("0")
