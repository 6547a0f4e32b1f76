"""識別子モジュール."""
from .customer_id import CustomerId
from .menu_item_id import MenuItemId
from .merchant_id import MerchantId
from .order_id import OrderId
from .session_id import SessionId

__all__ = [
    "CustomerId",
    "MenuItemId",
    "MerchantId",
    "OrderId",
    "SessionId",
]
