"""注文ステータスの列挙型."""
from __future__ import annotations

from enum import Enum


class OrderStatus(Enum):
    """注文のステータス.

    PENDING → PREPARING → EN_ROUTE → DELIVERED の順に進み、
    CANCELLED は終端以外のどの状態からも遷移できる。
    """

    PENDING = "pending"
    PREPARING = "preparing"
    EN_ROUTE = "en_route"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"

    def is_terminal(self) -> bool:
        """終端状態か判定."""
        return self in (OrderStatus.DELIVERED, OrderStatus.CANCELLED)

    def can_transition_to(self, target: OrderStatus) -> bool:
        """指定ステータスへ遷移可能か判定."""
        if self.is_terminal():
            return False
        if target == OrderStatus.CANCELLED:
            return True
        return _NEXT_STATUS.get(self) == target

    def get_display_name(self) -> str:
        """日本語表示名を返す."""
        names = {
            OrderStatus.PENDING: "受付済",
            OrderStatus.PREPARING: "調理中",
            OrderStatus.EN_ROUTE: "配達中",
            OrderStatus.DELIVERED: "配達完了",
            OrderStatus.CANCELLED: "キャンセル",
        }
        return names[self]


_NEXT_STATUS = {
    OrderStatus.PENDING: OrderStatus.PREPARING,
    OrderStatus.PREPARING: OrderStatus.EN_ROUTE,
    OrderStatus.EN_ROUTE: OrderStatus.DELIVERED,
}
