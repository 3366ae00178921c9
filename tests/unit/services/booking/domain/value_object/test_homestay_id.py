import pytest

from services.booking.domain.value_object.homestay_id import HomestayId


class TestHomestayId:
    def test_create_homestay_id(self):
        homestay_id = HomestayId(value="homestay-123")
        assert homestay_id.value == "homestay-123"

    def test_str_returns_value(self):
        assert str(HomestayId(value="homestay-123")) == "homestay-123"

    @pytest.mark.parametrize("value", ["", "   "])
    def test_empty_value_raises_error(self, value):
        with pytest.raises(ValueError, match="HomestayId cannot be empty"):
            HomestayId(value=value)
