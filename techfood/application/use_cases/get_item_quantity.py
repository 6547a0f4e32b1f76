"""カート内数量取得ユースケース."""
from techfood.domain.identifiers import MenuItemId, SessionId
from techfood.domain.ports import CartStore


class GetItemQuantityUseCase:
    """指定メニュー項目のカート内数量を取得するユースケース."""

    def __init__(self, cart_store: CartStore) -> None:
        """初期化."""
        self._cart_store = cart_store

    def execute(self, session_id: SessionId, menu_item_id: MenuItemId) -> int:
        """数量を取得する（カートにない場合は0）."""
        return self._cart_store.load(session_id).get_item_quantity(menu_item_id)
