"""注文取得ユースケース."""
from techfood.domain.entities import Order
from techfood.domain.identifiers import CustomerId, OrderId
from techfood.domain.ports import OrderRepository


class OrderNotFoundError(Exception):
    """注文が見つからないエラー."""

    def __init__(self, order_id: OrderId) -> None:
        self.order_id = order_id
        super().__init__(f"Order not found: {order_id}")


class OrderAccessDeniedError(Exception):
    """他の顧客の注文を参照しようとしたエラー."""

    pass


class GetOrderUseCase:
    """注文確認・詳細表示用に注文を取得するユースケース."""

    def __init__(self, order_repository: OrderRepository) -> None:
        """初期化.

        Args:
            order_repository: 注文リポジトリ
        """
        self._order_repository = order_repository

    def execute(self, order_id: OrderId, customer_id: CustomerId) -> Order:
        """注文を取得する.

        Raises:
            OrderNotFoundError: 注文が存在しない場合
            OrderAccessDeniedError: 注文が指定顧客のものでない場合
        """
        order = self._order_repository.find_by_id(order_id)
        if order is None:
            raise OrderNotFoundError(order_id)
        if order.customer_id != customer_id:
            raise OrderAccessDeniedError(f"Order {order_id} does not belong to customer")
        return order
