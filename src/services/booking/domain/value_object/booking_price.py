from dataclasses import dataclass
from decimal import MAX_PREC, Context, Decimal, localcontext

from services.booking.domain.enum.currency import Currency
from services.shared.domain.exception import BusinessRuleViolationException

# 加算で丸めが起きないよう精度を上限まで上げたコンテキスト
EXACT_CONTEXT = Context(prec=MAX_PREC)


@dataclass(frozen=True)
class BookingPrice:
    """予約料金の内訳（小計・割引・合計）

    - total_amount = subtotal + discount が常に成り立つ
    - discount は 0 または負の値（割引額）
    """

    subtotal: Decimal
    discount: Decimal
    total_amount: Decimal
    currency: Currency = Currency.USD

    def __post_init__(self) -> None:
        with localcontext(EXACT_CONTEXT):
            expected = self.subtotal + self.discount
        if self.total_amount != expected:
            raise BusinessRuleViolationException(
                "Total amount must equal subtotal plus discount: "
                f"{self.total_amount} != {self.subtotal} + {self.discount}"
            )

    def __str__(self) -> str:
        return f"{self.total_amount} {self.currency.value}"

    @classmethod
    def of(cls, subtotal: Decimal, discount: Decimal) -> "BookingPrice":
        """小計と割引額から合計を算出して生成"""
        with localcontext(EXACT_CONTEXT):
            total_amount = subtotal + discount
        return cls(subtotal=subtotal, discount=discount, total_amount=total_amount)
