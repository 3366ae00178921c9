class DomainException(Exception):
    """ドメイン層で発生する例外の基底クラス"""

    pass


class BusinessRuleViolationException(DomainException):
    """値オブジェクトやドメインサービスの不変条件が破られた場合"""

    pass
