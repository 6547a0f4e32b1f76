"""カートストアのインメモリ実装."""
import copy

from techfood.domain.entities import Cart
from techfood.domain.identifiers import SessionId
from techfood.domain.ports import CartStore


class InMemoryCartStore(CartStore):
    """カートストアのインメモリ実装.

    保存・読み込みのたびにディープコピーし、呼び出し側が保持する
    Cart の変更が save 前にストアへ漏れないようにする。
    """

    def __init__(self) -> None:
        """初期化."""
        self._carts: dict[str, Cart] = {}

    def load(self, session_id: SessionId) -> Cart:
        """カートを読み込む（存在しない場合は空のカート）."""
        cart = self._carts.get(session_id.value)
        if cart is None:
            return Cart.create()
        return copy.deepcopy(cart)

    def save(self, session_id: SessionId, cart: Cart) -> None:
        """カートを保存する."""
        self._carts[session_id.value] = copy.deepcopy(cart)

    def clear(self, session_id: SessionId) -> None:
        """カートを破棄する."""
        self._carts.pop(session_id.value, None)
