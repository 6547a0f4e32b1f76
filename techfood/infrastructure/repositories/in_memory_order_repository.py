"""注文リポジトリのインメモリ実装."""
import copy

from techfood.domain.entities import Order
from techfood.domain.identifiers import CustomerId, OrderId
from techfood.domain.ports import OrderRepository, OrderRepositoryError


class InMemoryOrderRepository(OrderRepository):
    """注文リポジトリのインメモリ実装."""

    def __init__(self) -> None:
        """初期化."""
        self._orders: dict[str, Order] = {}

    def create(self, order: Order) -> None:
        """注文を保存する（同じIDの注文が既にあればエラー）."""
        if order.order_id.value in self._orders:
            raise OrderRepositoryError(f"Order already exists: {order.order_id}")
        self._orders[order.order_id.value] = copy.deepcopy(order)

    def find_by_id(self, order_id: OrderId) -> Order | None:
        """注文IDで検索する."""
        order = self._orders.get(order_id.value)
        return None if order is None else copy.deepcopy(order)

    def find_by_customer_id(self, customer_id: CustomerId) -> list[Order]:
        """顧客IDで検索する（注文日時の新しい順）."""
        orders = [
            copy.deepcopy(order) for order in self._orders.values()
            if order.customer_id == customer_id
        ]
        return sorted(orders, key=lambda o: o.ordered_at, reverse=True)
