"""カート概要取得ユースケース."""
from dataclasses import dataclass
from typing import Optional

from techfood.domain.identifiers import SessionId
from techfood.domain.ports import CartStore


@dataclass(frozen=True)
class CartSummaryResult:
    """カート概要（ナビゲーションバーの件数表示や加盟店切替の確認用）."""

    has_items: bool
    merchant_id: Optional[str]
    merchant_name: str
    item_count: int


class GetCartSummaryUseCase:
    """カート概要取得ユースケース."""

    def __init__(self, cart_store: CartStore) -> None:
        """初期化."""
        self._cart_store = cart_store

    def execute(self, session_id: SessionId) -> CartSummaryResult:
        """カートの概要を取得する."""
        cart = self._cart_store.load(session_id)
        merchant_id = cart.get_merchant_id()
        return CartSummaryResult(
            has_items=not cart.is_empty(),
            merchant_id=None if merchant_id is None else str(merchant_id),
            merchant_name=cart.get_merchant_name(),
            item_count=cart.get_item_count(),
        )
