from decimal import Decimal

import pytest

from services.booking.domain.service import (
    LengthOfStayDiscountPolicy,
    NoDiscountPolicy,
)
from services.booking.infrastructure.env_discount_settings import load_discount_policy

ENV_NAMES = [
    "WEEKLY_DISCOUNT_RATE",
    "MONTHLY_DISCOUNT_RATE",
    "WEEKLY_MIN_NIGHTS",
    "MONTHLY_MIN_NIGHTS",
]


@pytest.fixture(autouse=True)
def clear_discount_env(monkeypatch):
    for name in ENV_NAMES:
        monkeypatch.delenv(name, raising=False)


class TestLoadDiscountPolicy:
    def test_defaults_to_no_discount(self):
        assert isinstance(load_discount_policy(), NoDiscountPolicy)

    def test_zero_rates_give_no_discount(self, monkeypatch):
        monkeypatch.setenv("WEEKLY_DISCOUNT_RATE", "0")
        monkeypatch.setenv("MONTHLY_DISCOUNT_RATE", "0.00")

        assert isinstance(load_discount_policy(), NoDiscountPolicy)

    def test_length_of_stay_policy_from_env(self, monkeypatch):
        monkeypatch.setenv("WEEKLY_DISCOUNT_RATE", "0.05")
        monkeypatch.setenv("MONTHLY_DISCOUNT_RATE", "0.15")

        policy = load_discount_policy()

        assert isinstance(policy, LengthOfStayDiscountPolicy)
        assert policy.get_discount_amount(Decimal("1000"), 7) == Decimal("-50.00")
        assert policy.get_discount_amount(Decimal("1000"), 28) == Decimal("-150.00")

    def test_custom_min_nights_from_env(self, monkeypatch):
        monkeypatch.setenv("WEEKLY_DISCOUNT_RATE", "0.10")
        monkeypatch.setenv("WEEKLY_MIN_NIGHTS", "5")
        monkeypatch.setenv("MONTHLY_MIN_NIGHTS", "20")

        policy = load_discount_policy()

        assert policy.get_discount_amount(Decimal("500"), 5) == Decimal("-50.00")

    def test_invalid_rate_raises_error(self, monkeypatch):
        monkeypatch.setenv("WEEKLY_DISCOUNT_RATE", "ten percent")

        with pytest.raises(ValueError):
            load_discount_policy()
