"""ドメインサービスモジュール."""
from .cart_to_order_converter import CartToOrderConverter

__all__ = [
    "CartToOrderConverter",
]
