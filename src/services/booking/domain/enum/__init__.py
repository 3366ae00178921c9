from .currency import Currency as Currency
