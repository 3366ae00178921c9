from enum import Enum


class Currency(str, Enum):
    """料金の通貨コード（ISO 4217）

    料金計算は単一通貨で行うため、現状は USD のみ。
    """

    USD = "USD"
