"""InMemoryOrderRepositoryのテスト."""
import pytest

from techfood.domain.entities import Order, OrderItem
from techfood.domain.enums import OrderStatus
from techfood.domain.identifiers import CustomerId, MenuItemId, MerchantId, OrderId
from techfood.domain.ports import OrderRepositoryError
from techfood.domain.value_objects import DeliveryDetails, Money
from techfood.infrastructure import InMemoryOrderRepository


def _order(order_id: str = "order-001") -> Order:
    oid = OrderId(order_id)
    return Order.create(
        order_id=oid,
        customer_id=CustomerId("customer-001"),
        merchant_id=MerchantId("1"),
        merchant_name="Pizzería Napoli",
        delivery=DeliveryDetails(recipient_name="山田太郎", phone="09012345678", address="東京都千代田区1-1-1"),
        items=[
            OrderItem(
                order_id=oid,
                menu_item_id=MenuItemId("1"),
                name="Pizza Margherita",
                quantity=2,
                unit_price_at_order_time=Money.of("8.99"),
                subtotal=Money.of("17.98"),
            )
        ],
        total=Money.of("17.98"),
    )


class TestInMemoryOrderRepository:
    """InMemoryOrderRepositoryの単体テスト."""

    def test_保存した注文をIDで取得できる(self) -> None:
        repository = InMemoryOrderRepository()
        repository.create(_order())

        found = repository.find_by_id(OrderId("order-001"))

        assert found is not None
        assert found.total == Money.of("17.98")
        assert found.items[0].quantity == 2

    def test_存在しない注文はNone(self) -> None:
        assert InMemoryOrderRepository().find_by_id(OrderId("order-999")) is None

    def test_同じIDの注文は保存できない(self) -> None:
        repository = InMemoryOrderRepository()
        repository.create(_order())
        with pytest.raises(OrderRepositoryError, match="already exists"):
            repository.create(_order())

    def test_取得した注文を変更しても保存内容は変わらない(self) -> None:
        repository = InMemoryOrderRepository()
        repository.create(_order())

        found = repository.find_by_id(OrderId("order-001"))
        found.cancel()

        assert repository.find_by_id(OrderId("order-001")).status == OrderStatus.PENDING

    def test_顧客IDで検索できる(self) -> None:
        repository = InMemoryOrderRepository()
        repository.create(_order("order-001"))
        repository.create(_order("order-002"))

        orders = repository.find_by_customer_id(CustomerId("customer-001"))

        assert {order.order_id.value for order in orders} == {"order-001", "order-002"}
        assert repository.find_by_customer_id(CustomerId("customer-999")) == []
