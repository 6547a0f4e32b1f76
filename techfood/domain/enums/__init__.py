"""列挙型モジュール."""
from .checkout_stage import CheckoutStage
from .order_status import OrderStatus

__all__ = [
    "CheckoutStage",
    "OrderStatus",
]
