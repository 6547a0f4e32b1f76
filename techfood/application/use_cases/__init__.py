"""ユースケースモジュール."""
from .add_to_cart import AddToCartResult, AddToCartUseCase
from .checkout import (
    CheckoutError,
    CheckoutResult,
    CheckoutUseCase,
    EmptyCartError,
    InvalidDeliveryDetailsError,
    OrderPersistFailureError,
)
from .clear_and_add_to_cart import ClearAndAddToCartUseCase
from .clear_cart import ClearCartUseCase
from .get_cart import CartItemDTO, GetCartResult, GetCartUseCase
from .get_cart_summary import CartSummaryResult, GetCartSummaryUseCase
from .get_item_quantity import GetItemQuantityUseCase
from .get_order import GetOrderUseCase, OrderAccessDeniedError, OrderNotFoundError
from .get_order_history import GetOrderHistoryUseCase
from .remove_from_cart import RemoveFromCartResult, RemoveFromCartUseCase
from .update_cart_item_quantity import (
    UpdateCartItemQuantityResult,
    UpdateCartItemQuantityUseCase,
)

__all__ = [
    # Cart Use Cases
    "AddToCartUseCase",
    "AddToCartResult",
    "ClearAndAddToCartUseCase",
    "UpdateCartItemQuantityUseCase",
    "UpdateCartItemQuantityResult",
    "RemoveFromCartUseCase",
    "RemoveFromCartResult",
    "ClearCartUseCase",
    "GetCartUseCase",
    "GetCartResult",
    "CartItemDTO",
    "GetCartSummaryUseCase",
    "CartSummaryResult",
    "GetItemQuantityUseCase",
    # Checkout Use Cases
    "CheckoutUseCase",
    "CheckoutResult",
    # Order Use Cases
    "GetOrderUseCase",
    "GetOrderHistoryUseCase",
    # Errors
    "CheckoutError",
    "EmptyCartError",
    "InvalidDeliveryDetailsError",
    "OrderPersistFailureError",
    "OrderAccessDeniedError",
    "OrderNotFoundError",
]
