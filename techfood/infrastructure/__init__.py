"""インフラストラクチャ層モジュール."""
from .providers import InMemoryMenuCatalog
from .repositories import (
    DynamoDBCartStore,
    DynamoDBOrderRepository,
    InMemoryCartStore,
    InMemoryOrderRepository,
)

__all__ = [
    "DynamoDBCartStore",
    "DynamoDBOrderRepository",
    "InMemoryCartStore",
    "InMemoryMenuCatalog",
    "InMemoryOrderRepository",
]
