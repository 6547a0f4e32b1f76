"""カート明細数量変更ユースケース."""
from dataclasses import dataclass

from techfood.domain.identifiers import MenuItemId, SessionId
from techfood.domain.ports import CartStore
from techfood.domain.value_objects import Money


@dataclass(frozen=True)
class UpdateCartItemQuantityResult:
    """数量変更結果."""

    updated: bool
    removed: bool
    item_quantity: int
    item_subtotal: Money
    item_count: int
    total_amount: Money


class UpdateCartItemQuantityUseCase:
    """カート明細の数量を変更するユースケース（0以下は削除）."""

    def __init__(self, cart_store: CartStore) -> None:
        """初期化.

        Args:
            cart_store: カートストア
        """
        self._cart_store = cart_store

    def execute(
        self, session_id: SessionId, menu_item_id: MenuItemId, quantity: int
    ) -> UpdateCartItemQuantityResult:
        """明細の数量を変更する.

        明細が存在しない場合は何もしない（updated=False）。

        Raises:
            CartStoreUnavailableError: カートストアに到達できない場合
        """
        cart = self._cart_store.load(session_id)
        updated = cart.set_quantity(menu_item_id, quantity)
        if updated:
            self._cart_store.save(session_id, cart)

        item = cart.get_item(menu_item_id)
        return UpdateCartItemQuantityResult(
            updated=updated,
            removed=updated and item is None,
            item_quantity=0 if item is None else item.quantity,
            item_subtotal=Money.zero() if item is None else item.get_line_subtotal(),
            item_count=cart.get_item_count(),
            total_amount=cart.get_total_amount(),
        )
