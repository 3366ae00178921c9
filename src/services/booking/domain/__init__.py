from .enum import Currency as Currency
from .factory import PricedDayDetails as PricedDayDetails
from .factory import PricedDayFactory as PricedDayFactory
from .service import DiscountPolicy as DiscountPolicy
from .service import LengthOfStayDiscountPolicy as LengthOfStayDiscountPolicy
from .service import NoDiscountPolicy as NoDiscountPolicy
from .service import PricingService as PricingService
from .value_object import BookingPrice as BookingPrice
from .value_object import HomestayId as HomestayId
from .value_object import PricedDay as PricedDay
