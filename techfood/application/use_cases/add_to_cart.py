"""カート追加ユースケース."""
from dataclasses import dataclass

from techfood.domain.entities import CartItem
from techfood.domain.identifiers import MerchantId, SessionId
from techfood.domain.ports import CartStore
from techfood.domain.value_objects import Money


@dataclass(frozen=True)
class AddToCartResult:
    """カート追加結果."""

    merchant_id: MerchantId
    item_quantity: int
    item_count: int
    total_amount: Money


class AddToCartUseCase:
    """カートに明細を追加するユースケース."""

    def __init__(self, cart_store: CartStore) -> None:
        """初期化.

        Args:
            cart_store: カートストア
        """
        self._cart_store = cart_store

    def execute(self, session_id: SessionId, item: CartItem) -> AddToCartResult:
        """明細をカートに追加する.

        Args:
            session_id: セッションID
            item: 追加する明細（価格スナップショット済み）

        Returns:
            カート追加結果

        Raises:
            MerchantMismatchError: カートが別の加盟店の明細を保持している場合（カートは保存されない）
            CartStoreUnavailableError: カートストアに到達できない場合
        """
        cart = self._cart_store.load(session_id)
        merged = cart.add_item(item)
        self._cart_store.save(session_id, cart)

        return AddToCartResult(
            merchant_id=merged.merchant_id,
            item_quantity=merged.quantity,
            item_count=cart.get_item_count(),
            total_amount=cart.get_total_amount(),
        )
