"""カート明細削除ユースケース."""
from dataclasses import dataclass

from techfood.domain.identifiers import MenuItemId, SessionId
from techfood.domain.ports import CartStore
from techfood.domain.value_objects import Money


@dataclass(frozen=True)
class RemoveFromCartResult:
    """カート明細削除結果."""

    removed: bool
    item_count: int
    total_amount: Money
    is_empty: bool


class RemoveFromCartUseCase:
    """カートから明細を削除するユースケース."""

    def __init__(self, cart_store: CartStore) -> None:
        """初期化.

        Args:
            cart_store: カートストア
        """
        self._cart_store = cart_store

    def execute(self, session_id: SessionId, menu_item_id: MenuItemId) -> RemoveFromCartResult:
        """明細をカートから削除する.

        明細が存在しない場合はエラーにせず removed=False を返す。

        Raises:
            CartStoreUnavailableError: カートストアに到達できない場合
        """
        cart = self._cart_store.load(session_id)
        removed = cart.remove_item(menu_item_id)
        if removed:
            self._cart_store.save(session_id, cart)

        return RemoveFromCartResult(
            removed=removed,
            item_count=cart.get_item_count(),
            total_amount=cart.get_total_amount(),
            is_empty=cart.is_empty(),
        )
