"""チェックアウトAPI ハンドラー."""
import logging
from typing import Any

from techfood.api.auth import AuthenticationError, require_authenticated_customer_id
from techfood.api.dependencies import Dependencies
from techfood.api.request import get_body, get_session_id
from techfood.api.response import (
    bad_request_response,
    service_unavailable_response,
    success_response,
    unauthorized_response,
)
from techfood.application.use_cases import (
    CheckoutUseCase,
    EmptyCartError,
    InvalidDeliveryDetailsError,
    OrderPersistFailureError,
)
from techfood.domain.ports import CartStoreUnavailableError
from techfood.domain.value_objects import DeliveryDetails

logger = logging.getLogger(__name__)


def checkout(event: dict, context: Any) -> dict:
    """カートの内容で注文を確定する.

    POST /checkout

    Headers:
        X-Session-Id: セッションID
        Authorization: Cognito トークン（必須）

    Request Body:
        recipient_name: 受取人名
        phone: 電話番号
        address: 配達先住所
        notes: 配達メモ（オプション）

    Returns:
        作成された注文の概要（201）
    """
    try:
        customer_id = require_authenticated_customer_id(event)
    except AuthenticationError:
        return unauthorized_response(event=event)

    session_id = get_session_id(event)
    if session_id is None:
        return bad_request_response(
            "X-Session-Id header is required", error_code="SESSION_REQUIRED", event=event
        )

    try:
        body = get_body(event)
    except ValueError as e:
        return bad_request_response(str(e), event=event)

    delivery = DeliveryDetails.from_dict(body)

    use_case = CheckoutUseCase(
        cart_store=Dependencies.get_cart_store(),
        order_repository=Dependencies.get_order_repository(),
    )

    try:
        result = use_case.execute(session_id, customer_id, delivery)
    except EmptyCartError:
        return bad_request_response("Cart is empty", error_code="EMPTY_CART", event=event)
    except InvalidDeliveryDetailsError as e:
        return bad_request_response(
            str(e),
            error_code="INVALID_DELIVERY_DETAILS",
            event=event,
            details={"fields": e.fields},
        )
    except OrderPersistFailureError as e:
        logger.exception("OrderPersistFailureError: %s", e)
        return service_unavailable_response(
            "Order could not be placed, please retry",
            error_code="ORDER_PERSIST_FAILURE",
            event=event,
        )
    except CartStoreUnavailableError as e:
        logger.exception("CartStoreUnavailableError: %s", e)
        return service_unavailable_response(
            "Cart is temporarily unavailable, please retry",
            error_code="CART_STORE_UNAVAILABLE",
            event=event,
        )

    return success_response(
        {
            "order_id": str(result.order_id),
            "status": result.status.value,
            "total": result.total.to_string(),
            "item_count": result.item_count,
            "cart_cleared": result.cart_cleared,
        },
        status_code=201,
        event=event,
    )
