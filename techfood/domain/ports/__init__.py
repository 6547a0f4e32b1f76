"""ポートモジュール."""
from .cart_store import CartStore, CartStoreUnavailableError
from .menu_catalog import MenuCatalog, MenuItemData
from .order_repository import OrderRepository, OrderRepositoryError

__all__ = [
    "CartStore",
    "CartStoreUnavailableError",
    "MenuCatalog",
    "MenuItemData",
    "OrderRepository",
    "OrderRepositoryError",
]
