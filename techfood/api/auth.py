"""認証ユーティリティ."""
from techfood.domain.identifiers import CustomerId


class AuthenticationError(Exception):
    """認証エラー."""

    pass


def get_authenticated_customer_id(event: dict) -> CustomerId | None:
    """認証済み顧客IDを取得する.

    Cognito Authorizer が設定されたエンドポイントでは、
    event["requestContext"]["authorizer"]["claims"]["sub"] に顧客IDが含まれる。

    Args:
        event: Lambda イベント

    Returns:
        顧客ID（未認証の場合はNone）
    """
    try:
        claims = event.get("requestContext", {}).get("authorizer", {}).get("claims", {})
        sub = claims.get("sub")
        if sub:
            return CustomerId(sub)
    except (AttributeError, TypeError):
        # event構造が想定外の場合（値がdictでない等）は未認証として扱う
        pass
    return None


def require_authenticated_customer_id(event: dict) -> CustomerId:
    """認証済み顧客IDを取得する（必須）.

    Raises:
        AuthenticationError: 未認証の場合
    """
    customer_id = get_authenticated_customer_id(event)
    if customer_id is None:
        raise AuthenticationError("Authentication required")
    return customer_id
