"""エンティティモジュール."""
from .cart import Cart, MerchantMismatchError
from .cart_item import CartItem
from .order import InvalidOrderStatusTransitionError, Order, OrderItem

__all__ = [
    "Cart",
    "CartItem",
    "InvalidOrderStatusTransitionError",
    "MerchantMismatchError",
    "Order",
    "OrderItem",
]
