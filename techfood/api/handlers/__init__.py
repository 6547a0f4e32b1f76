"""Lambdaハンドラーモジュール."""
from .cart import (
    add_to_cart,
    clear_and_add_to_cart,
    clear_cart,
    get_cart,
    get_cart_summary,
    get_item_quantity,
    remove_from_cart,
    update_cart_item_quantity,
)
from .checkout import checkout
from .orders import get_order, get_order_history

__all__ = [
    # Cart
    "add_to_cart",
    "clear_and_add_to_cart",
    "update_cart_item_quantity",
    "remove_from_cart",
    "clear_cart",
    "get_cart",
    "get_cart_summary",
    "get_item_quantity",
    # Checkout
    "checkout",
    # Orders
    "get_order",
    "get_order_history",
]
