"""注文リポジトリインターフェース."""
from abc import ABC, abstractmethod

from ..entities import Order
from ..identifiers import CustomerId, OrderId


class OrderRepositoryError(Exception):
    """注文の永続化に失敗したエラー（タイムアウトを含む）."""

    pass


class OrderRepository(ABC):
    """注文リポジトリのインターフェース."""

    @abstractmethod
    def create(self, order: Order) -> None:
        """注文と明細を1単位として保存する.

        一部だけが書き込まれることはない。失敗時は OrderRepositoryError を送出する。
        """
        pass

    @abstractmethod
    def find_by_id(self, order_id: OrderId) -> Order | None:
        """注文IDで検索する."""
        pass

    @abstractmethod
    def find_by_customer_id(self, customer_id: CustomerId) -> list[Order]:
        """顧客IDで検索する（注文日時の新しい順）."""
        pass
