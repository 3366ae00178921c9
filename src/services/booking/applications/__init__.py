from .quote_booking_price import QuoteBookingPriceService as QuoteBookingPriceService
