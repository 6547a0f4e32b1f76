"""依存性注入コンテナ."""
import os

from techfood.domain.ports import CartStore, MenuCatalog, OrderRepository
from techfood.infrastructure import (
    InMemoryCartStore,
    InMemoryMenuCatalog,
    InMemoryOrderRepository,
)


def _use_dynamodb_cart() -> bool:
    """カートにDynamoDBを使用するか判定する."""
    return os.environ.get("CART_TABLE_NAME") is not None


def _use_dynamodb_order() -> bool:
    """注文にDynamoDBを使用するか判定する."""
    return os.environ.get("ORDER_TABLE_NAME") is not None


class Dependencies:
    """依存性を管理するコンテナ.

    CART_TABLE_NAME / ORDER_TABLE_NAME 環境変数が設定されている場合はDynamoDB実装を使用。
    そうでない場合はインメモリ実装を使用（ローカル開発・テスト用）。
    """

    _cart_store: CartStore | None = None
    _order_repository: OrderRepository | None = None
    _menu_catalog: MenuCatalog | None = None

    @classmethod
    def get_cart_store(cls) -> CartStore:
        """カートストアを取得する."""
        if cls._cart_store is None:
            if _use_dynamodb_cart():
                from techfood.infrastructure import DynamoDBCartStore

                cls._cart_store = DynamoDBCartStore()
            else:
                cls._cart_store = InMemoryCartStore()
        return cls._cart_store

    @classmethod
    def get_order_repository(cls) -> OrderRepository:
        """注文リポジトリを取得する."""
        if cls._order_repository is None:
            if _use_dynamodb_order():
                from techfood.infrastructure import DynamoDBOrderRepository

                cls._order_repository = DynamoDBOrderRepository()
            else:
                cls._order_repository = InMemoryOrderRepository()
        return cls._order_repository

    @classmethod
    def get_menu_catalog(cls) -> MenuCatalog:
        """メニューカタログを取得する."""
        if cls._menu_catalog is None:
            cls._menu_catalog = InMemoryMenuCatalog()
        return cls._menu_catalog

    @classmethod
    def set_cart_store(cls, store: CartStore) -> None:
        """カートストアを設定する（テスト用）."""
        cls._cart_store = store

    @classmethod
    def set_order_repository(cls, repository: OrderRepository) -> None:
        """注文リポジトリを設定する（テスト用）."""
        cls._order_repository = repository

    @classmethod
    def set_menu_catalog(cls, catalog: MenuCatalog) -> None:
        """メニューカタログを設定する（テスト用）."""
        cls._menu_catalog = catalog

    @classmethod
    def reset(cls) -> None:
        """全ての依存性をリセットする（テスト用）."""
        cls._cart_store = None
        cls._order_repository = None
        cls._menu_catalog = None
