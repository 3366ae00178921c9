from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from services.booking.domain.service.discount_policy import DiscountPolicy
from services.booking.domain.value_object.homestay_id import HomestayId


@pytest.fixture
def homestay_id():
    """全テスト共通の HomestayId フィクスチャ"""
    return HomestayId(value="homestay-123")


@pytest.fixture
def mock_discount_policy():
    """割引ポリシーのモックフィクスチャ（既定は割引なし）"""
    policy = MagicMock(spec=DiscountPolicy)
    policy.get_discount_amount.return_value = Decimal("0")
    return policy
