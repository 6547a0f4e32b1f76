"""API層モジュール."""
from .dependencies import Dependencies
from .handlers import (
    add_to_cart,
    checkout,
    clear_and_add_to_cart,
    clear_cart,
    get_cart,
    get_cart_summary,
    get_item_quantity,
    get_order,
    get_order_history,
    remove_from_cart,
    update_cart_item_quantity,
)
from .request import get_body, get_header, get_path_parameter, get_session_id
from .response import (
    bad_request_response,
    conflict_response,
    error_response,
    forbidden_response,
    internal_error_response,
    not_found_response,
    service_unavailable_response,
    success_response,
    unauthorized_response,
)

__all__ = [
    # Dependencies
    "Dependencies",
    # Request utilities
    "get_body",
    "get_header",
    "get_path_parameter",
    "get_session_id",
    # Response utilities
    "success_response",
    "error_response",
    "not_found_response",
    "bad_request_response",
    "conflict_response",
    "service_unavailable_response",
    "internal_error_response",
    "unauthorized_response",
    "forbidden_response",
    # Handlers
    "add_to_cart",
    "clear_and_add_to_cart",
    "update_cart_item_quantity",
    "remove_from_cart",
    "clear_cart",
    "get_cart",
    "get_cart_summary",
    "get_item_quantity",
    "checkout",
    "get_order",
    "get_order_history",
]
