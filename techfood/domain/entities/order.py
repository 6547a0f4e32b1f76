"""注文エンティティ."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from ..enums import OrderStatus
from ..identifiers import CustomerId, MenuItemId, MerchantId, OrderId
from ..value_objects import DeliveryDetails, Money


class InvalidOrderStatusTransitionError(Exception):
    """許可されていない注文ステータス遷移のエラー."""

    def __init__(self, current: OrderStatus, target: OrderStatus) -> None:
        self.current = current
        self.target = target
        super().__init__(f"Cannot transition order from {current.value} to {target.value}")


@dataclass(frozen=True)
class OrderItem:
    """注文明細（書き込み後は不変）."""

    order_id: OrderId
    menu_item_id: MenuItemId
    name: str  # 表示用スナップショット
    quantity: int
    unit_price_at_order_time: Money
    subtotal: Money
    special_notes: Optional[str] = None

    def __post_init__(self) -> None:
        """バリデーション."""
        if self.quantity < 1:
            raise ValueError("Quantity must be at least 1")
        if self.subtotal != self.unit_price_at_order_time.multiply(self.quantity):
            raise ValueError("Subtotal must equal unit price times quantity")


@dataclass
class Order:
    """チェックアウトで確定した注文.

    作成後に変化するのは status（と updated_at）のみ。
    total は作成時点の明細小計の合計で、後から再計算しない。
    """

    order_id: OrderId
    customer_id: CustomerId
    merchant_id: MerchantId
    merchant_name: str
    delivery: DeliveryDetails
    items: tuple[OrderItem, ...]
    total: Money
    status: OrderStatus
    ordered_at: datetime
    updated_at: datetime

    @classmethod
    def create(
        cls,
        order_id: OrderId,
        customer_id: CustomerId,
        merchant_id: MerchantId,
        merchant_name: str,
        delivery: DeliveryDetails,
        items: list[OrderItem],
        total: Money,
    ) -> Order:
        """新しい注文を作成する.

        Raises:
            ValueError: 明細が空、他注文の明細を含む、または合計が明細小計の和と一致しない場合
        """
        if not items:
            raise ValueError("Order must contain at least one item")
        if any(item.order_id != order_id for item in items):
            raise ValueError("All order items must belong to the order")

        subtotal_sum = Money.zero()
        for item in items:
            subtotal_sum = subtotal_sum.add(item.subtotal)
        if subtotal_sum != total:
            raise ValueError(
                f"Order total {total.to_string()} does not match item subtotals {subtotal_sum.to_string()}"
            )

        now = datetime.now(timezone.utc)
        return cls(
            order_id=order_id,
            customer_id=customer_id,
            merchant_id=merchant_id,
            merchant_name=merchant_name,
            delivery=delivery,
            items=tuple(items),
            total=total,
            status=OrderStatus.PENDING,
            ordered_at=now,
            updated_at=now,
        )

    def transition_to(self, status: OrderStatus) -> None:
        """ステータスを遷移させる."""
        if not self.status.can_transition_to(status):
            raise InvalidOrderStatusTransitionError(self.status, status)
        self.status = status
        self.updated_at = datetime.now(timezone.utc)

    def cancel(self) -> None:
        """注文をキャンセルする."""
        self.transition_to(OrderStatus.CANCELLED)

    def get_item_count(self) -> int:
        """商品点数（数量の合計）を取得する."""
        return sum(item.quantity for item in self.items)
