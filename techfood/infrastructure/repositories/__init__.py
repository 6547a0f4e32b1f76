"""リポジトリ実装モジュール."""
from .dynamodb_cart_store import DynamoDBCartStore
from .dynamodb_order_repository import DynamoDBOrderRepository
from .in_memory_cart_store import InMemoryCartStore
from .in_memory_order_repository import InMemoryOrderRepository

__all__ = [
    "DynamoDBCartStore",
    "DynamoDBOrderRepository",
    "InMemoryCartStore",
    "InMemoryOrderRepository",
]
