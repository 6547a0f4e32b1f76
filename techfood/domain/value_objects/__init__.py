"""値オブジェクトモジュール."""
from .delivery_details import DeliveryDetails
from .money import Money

__all__ = [
    "DeliveryDetails",
    "Money",
]
