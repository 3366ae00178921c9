from decimal import Decimal, InvalidOperation


def to_decimal(v: object) -> Decimal:
    """任意の値を Decimal に変換する

    Pydantic の field_validator (mode="before") から呼び出すことを想定。
    float は str 経由で変換し、2進小数の誤差を持ち込まない。
    変換できない値は ValueError として扱い、Pydantic の検証エラーに載せる。
    """
    if isinstance(v, Decimal):
        return v
    if isinstance(v, bool):
        raise ValueError(f"Not a decimal value: {v!r}")
    try:
        return Decimal(str(v))
    except InvalidOperation as e:
        raise ValueError(f"Not a decimal value: {v!r}") from e
