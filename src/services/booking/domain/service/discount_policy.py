from abc import ABC, abstractmethod
from decimal import Decimal


class DiscountPolicy(ABC):
    """割引額を算出するドメインサービスのインターフェース

    - 同じ入力に対して常に同じ値を返す純粋な計算であること
    - 戻り値は小計に加算する調整額（割引なしは 0、割引は負の値）
    """

    @abstractmethod
    def get_discount_amount(self, subtotal: Decimal, nights: int) -> Decimal:
        """小計と宿泊数から割引額を算出する"""
        raise NotImplementedError
