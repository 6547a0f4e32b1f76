"""カートを空にしてから追加するユースケース."""
from techfood.domain.entities import CartItem
from techfood.domain.identifiers import SessionId
from techfood.domain.ports import CartStore

from .add_to_cart import AddToCartResult, AddToCartUseCase
from .clear_cart import ClearCartUseCase


class ClearAndAddToCartUseCase:
    """別の加盟店の商品に切り替えるため、カートを空にしてから明細を追加するユースケース.

    利用者が明示的に選んだ場合のみ呼ばれる。クリアと追加は別々の操作として順に行う。
    """

    def __init__(self, cart_store: CartStore) -> None:
        """初期化.

        Args:
            cart_store: カートストア
        """
        self._clear_cart = ClearCartUseCase(cart_store)
        self._add_to_cart = AddToCartUseCase(cart_store)

    def execute(self, session_id: SessionId, item: CartItem) -> AddToCartResult:
        """カートを空にしてから明細を追加する.

        Raises:
            CartStoreUnavailableError: カートストアに到達できない場合
        """
        self._clear_cart.execute(session_id)
        return self._add_to_cart.execute(session_id, item)
