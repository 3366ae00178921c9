from .discount_policy import DiscountPolicy as DiscountPolicy
from .length_of_stay_discount_policy import (
    LengthOfStayDiscountPolicy as LengthOfStayDiscountPolicy,
)
from .no_discount_policy import NoDiscountPolicy as NoDiscountPolicy
from .pricing_service import PricingService as PricingService
