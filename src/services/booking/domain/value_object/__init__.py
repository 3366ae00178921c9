from .booking_price import BookingPrice as BookingPrice
from .homestay_id import HomestayId as HomestayId
from .priced_day import PricedDay as PricedDay
