from .priced_day_factory import PricedDayDetails as PricedDayDetails
from .priced_day_factory import PricedDayFactory as PricedDayFactory
