import json
from typing import Union

from pydantic import BaseModel


def api_response(status_code: int, body: Union[BaseModel, dict]) -> dict:
    """API Gateway プロキシ統合のレスポンス形式を生成する

    Pydantic モデルは None のフィールドを除いて辞書化する。
    """
    if isinstance(body, BaseModel):
        body = body.model_dump(mode="json", exclude_none=True)
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body, default=str),
    }
