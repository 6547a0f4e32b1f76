"""注文API ハンドラー."""
import logging
from typing import Any

from techfood.api.auth import AuthenticationError, require_authenticated_customer_id
from techfood.api.dependencies import Dependencies
from techfood.api.request import get_path_parameter
from techfood.api.response import (
    bad_request_response,
    forbidden_response,
    not_found_response,
    service_unavailable_response,
    success_response,
    unauthorized_response,
)
from techfood.application.use_cases import (
    GetOrderHistoryUseCase,
    GetOrderUseCase,
    OrderAccessDeniedError,
    OrderNotFoundError,
)
from techfood.domain.entities import Order
from techfood.domain.identifiers import OrderId
from techfood.domain.ports import OrderRepositoryError

logger = logging.getLogger(__name__)


def _order_to_dict(order: Order) -> dict:
    """注文をレスポンス用の辞書に変換する."""
    return {
        "order_id": str(order.order_id),
        "merchant_id": str(order.merchant_id),
        "merchant_name": order.merchant_name,
        "status": order.status.value,
        "status_display_name": order.status.get_display_name(),
        "total": order.total.to_string(),
        "item_count": order.get_item_count(),
        "delivery": {
            "recipient_name": order.delivery.recipient_name,
            "phone": order.delivery.phone,
            "address": order.delivery.address,
            "notes": order.delivery.notes,
        },
        "items": [
            {
                "menu_item_id": str(item.menu_item_id),
                "name": item.name,
                "quantity": item.quantity,
                "unit_price": item.unit_price_at_order_time.to_string(),
                "subtotal": item.subtotal.to_string(),
                "special_notes": item.special_notes,
            }
            for item in order.items
        ],
        "ordered_at": order.ordered_at.isoformat(),
        "updated_at": order.updated_at.isoformat(),
    }


def get_order(event: dict, context: Any) -> dict:
    """注文詳細を取得する（本人の注文のみ）.

    GET /orders/{order_id}
    """
    try:
        customer_id = require_authenticated_customer_id(event)
    except AuthenticationError:
        return unauthorized_response(event=event)

    order_id_str = get_path_parameter(event, "order_id")
    if not order_id_str:
        return bad_request_response("order_id is required", event=event)

    use_case = GetOrderUseCase(Dependencies.get_order_repository())
    try:
        order = use_case.execute(OrderId(order_id_str), customer_id)
    except OrderNotFoundError:
        return not_found_response("Order", event=event)
    except OrderAccessDeniedError:
        return forbidden_response(event=event)
    except OrderRepositoryError as e:
        logger.exception("OrderRepositoryError: %s", e)
        return service_unavailable_response(event=event)

    return success_response(_order_to_dict(order), event=event)


def get_order_history(event: dict, context: Any) -> dict:
    """注文履歴を取得する（新しい順）.

    GET /orders
    """
    try:
        customer_id = require_authenticated_customer_id(event)
    except AuthenticationError:
        return unauthorized_response(event=event)

    use_case = GetOrderHistoryUseCase(Dependencies.get_order_repository())
    try:
        orders = use_case.execute(customer_id)
    except OrderRepositoryError as e:
        logger.exception("OrderRepositoryError: %s", e)
        return service_unavailable_response(event=event)

    return success_response(
        {"orders": [_order_to_dict(order) for order in orders]},
        event=event,
    )
