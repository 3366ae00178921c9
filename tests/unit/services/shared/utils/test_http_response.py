import json
from decimal import Decimal

from pydantic import BaseModel

from services.shared.utils.http_response import api_response


class _Body(BaseModel):
    message: str
    details: list | None = None


class TestApiResponse:
    def test_dict_body(self):
        response = api_response(200, {"amount": Decimal("1.50")})

        assert response["statusCode"] == 200
        assert response["headers"] == {"Content-Type": "application/json"}
        assert json.loads(response["body"]) == {"amount": "1.50"}

    def test_model_body_drops_none_fields(self):
        response = api_response(400, _Body(message="bad"))

        assert json.loads(response["body"]) == {"message": "bad"}
