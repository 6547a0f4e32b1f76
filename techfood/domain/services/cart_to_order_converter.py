"""カートから注文への変換ドメインサービス."""
from ..entities import Cart, Order, OrderItem
from ..identifiers import CustomerId, OrderId
from ..value_objects import DeliveryDetails


class CartToOrderConverter:
    """Cartのスナップショットから Order と OrderItem を組み立てるサービス."""

    @staticmethod
    def convert(
        cart: Cart,
        customer_id: CustomerId,
        delivery: DeliveryDetails,
    ) -> Order:
        """カート内の全明細を注文明細に変換し、注文を作成する.

        引数の cart は1回の読み込みで得たものを渡すこと。
        加盟店・合計・各明細はすべてこの1つのスナップショットから取る。

        Raises:
            ValueError: カートが空の場合
        """
        items = cart.get_items()
        merchant_id = cart.get_merchant_id()
        if not items or merchant_id is None:
            raise ValueError("Cannot build an order from an empty cart")

        order_id = OrderId.generate()
        order_items = [
            OrderItem(
                order_id=order_id,
                menu_item_id=item.menu_item_id,
                name=item.name,
                quantity=item.quantity,
                unit_price_at_order_time=item.unit_price,
                subtotal=item.get_line_subtotal(),
                special_notes=item.special_notes,
            )
            for item in items
        ]

        return Order.create(
            order_id=order_id,
            customer_id=customer_id,
            merchant_id=merchant_id,
            merchant_name=cart.get_merchant_name(),
            delivery=delivery,
            items=order_items,
            total=cart.get_total_amount(),
        )
