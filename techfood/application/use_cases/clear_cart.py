"""カートクリアユースケース."""
from techfood.domain.identifiers import SessionId
from techfood.domain.ports import CartStore


class ClearCartUseCase:
    """カートを空にするユースケース."""

    def __init__(self, cart_store: CartStore) -> None:
        """初期化.

        Args:
            cart_store: カートストア
        """
        self._cart_store = cart_store

    def execute(self, session_id: SessionId) -> None:
        """カートを空にする.

        Raises:
            CartStoreUnavailableError: カートストアに到達できない場合
        """
        self._cart_store.clear(session_id)
