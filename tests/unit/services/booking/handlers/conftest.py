import json
from dataclasses import dataclass

import pytest


@dataclass
class FakeLambdaContext:
    function_name: str = "QuoteBookingPriceLambda"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = (
        "arn:aws:lambda:ap-northeast-1:123456789012:function:QuoteBookingPriceLambda"
    )
    aws_request_id: str = "52fdfc07-2182-154f-163f-5f0f9a621d72"


@pytest.fixture
def lambda_context():
    return FakeLambdaContext()


@pytest.fixture
def create_api_event():
    """API Gateway プロキシイベントを生成する Factory fixture"""

    def _factory(body: object = None, raw_body: str | None = None) -> dict:
        if raw_body is None and body is not None:
            raw_body = json.dumps(body)
        return {
            "resource": "/quotes",
            "path": "/quotes",
            "httpMethod": "POST",
            "headers": {"Content-Type": "application/json"},
            "requestContext": {"requestId": "req-1", "stage": "prod"},
            "body": raw_body,
            "isBase64Encoded": False,
        }

    return _factory
