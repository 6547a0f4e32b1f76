"""ドメイン層モジュール."""
from .entities import (
    Cart,
    CartItem,
    InvalidOrderStatusTransitionError,
    MerchantMismatchError,
    Order,
    OrderItem,
)
from .enums import CheckoutStage, OrderStatus
from .identifiers import CustomerId, MenuItemId, MerchantId, OrderId, SessionId
from .ports import (
    CartStore,
    CartStoreUnavailableError,
    MenuCatalog,
    MenuItemData,
    OrderRepository,
    OrderRepositoryError,
)
from .services import CartToOrderConverter
from .value_objects import DeliveryDetails, Money

__all__ = [
    # Identifiers
    "CustomerId",
    "MenuItemId",
    "MerchantId",
    "OrderId",
    "SessionId",
    # Enums
    "CheckoutStage",
    "OrderStatus",
    # Value Objects
    "DeliveryDetails",
    "Money",
    # Entities
    "Cart",
    "CartItem",
    "Order",
    "OrderItem",
    # Errors
    "InvalidOrderStatusTransitionError",
    "MerchantMismatchError",
    # Ports
    "CartStore",
    "CartStoreUnavailableError",
    "MenuCatalog",
    "MenuItemData",
    "OrderRepository",
    "OrderRepositoryError",
    # Services
    "CartToOrderConverter",
]
