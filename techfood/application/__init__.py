"""アプリケーション層モジュール."""
from .use_cases import (
    AddToCartResult,
    AddToCartUseCase,
    CheckoutResult,
    CheckoutUseCase,
    ClearAndAddToCartUseCase,
    ClearCartUseCase,
    EmptyCartError,
    GetCartResult,
    GetCartUseCase,
    InvalidDeliveryDetailsError,
    OrderPersistFailureError,
    RemoveFromCartUseCase,
    UpdateCartItemQuantityUseCase,
)

__all__ = [
    # Cart Use Cases
    "AddToCartUseCase",
    "AddToCartResult",
    "ClearAndAddToCartUseCase",
    "UpdateCartItemQuantityUseCase",
    "RemoveFromCartUseCase",
    "ClearCartUseCase",
    "GetCartUseCase",
    "GetCartResult",
    # Checkout Use Cases
    "CheckoutUseCase",
    "CheckoutResult",
    # Errors
    "EmptyCartError",
    "InvalidDeliveryDetailsError",
    "OrderPersistFailureError",
]
