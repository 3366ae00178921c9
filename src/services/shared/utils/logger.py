from typing import Optional

from aws_lambda_powertools import Logger


def get_logger(service_name: Optional[str] = None) -> Logger:
    """Powertools Logger を生成する

    service_name を省略した場合は POWERTOOLS_SERVICE_NAME 環境変数の値が使われる。
    ログレベルは POWERTOOLS_LOG_LEVEL で切り替える。
    """
    return Logger(service=service_name)
