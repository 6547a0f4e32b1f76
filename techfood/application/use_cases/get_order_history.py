"""注文履歴取得ユースケース."""
from techfood.domain.entities import Order
from techfood.domain.identifiers import CustomerId
from techfood.domain.ports import OrderRepository


class GetOrderHistoryUseCase:
    """顧客の注文履歴を取得するユースケース."""

    def __init__(self, order_repository: OrderRepository) -> None:
        """初期化."""
        self._order_repository = order_repository

    def execute(self, customer_id: CustomerId) -> list[Order]:
        """注文履歴を新しい順に取得する."""
        orders = self._order_repository.find_by_customer_id(customer_id)
        return sorted(orders, key=lambda o: o.ordered_at, reverse=True)
