import os

from services.booking.domain.service import (
    DiscountPolicy,
    LengthOfStayDiscountPolicy,
    NoDiscountPolicy,
)
from services.shared.utils import to_decimal


def load_discount_policy() -> DiscountPolicy:
    """環境変数から割引ポリシーを組み立てる

    - WEEKLY_DISCOUNT_RATE / MONTHLY_DISCOUNT_RATE: 割引率（0 以上 1 未満、既定 0）
    - WEEKLY_MIN_NIGHTS / MONTHLY_MIN_NIGHTS: 適用に必要な宿泊数（既定 7 / 28）

    割引率がどちらも 0 の場合は割引なし。
    """
    weekly_rate = to_decimal(os.getenv("WEEKLY_DISCOUNT_RATE", "0"))
    monthly_rate = to_decimal(os.getenv("MONTHLY_DISCOUNT_RATE", "0"))

    if not weekly_rate and not monthly_rate:
        return NoDiscountPolicy()

    return LengthOfStayDiscountPolicy(
        weekly_rate=weekly_rate,
        monthly_rate=monthly_rate,
        weekly_min_nights=int(os.getenv("WEEKLY_MIN_NIGHTS", "7")),
        monthly_min_nights=int(os.getenv("MONTHLY_MIN_NIGHTS", "28")),
    )
