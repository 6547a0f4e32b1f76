"""AddToCartUseCase・ClearAndAddToCartUseCaseのテスト."""
import pytest

from techfood.application.use_cases import AddToCartUseCase, ClearAndAddToCartUseCase
from techfood.domain.entities import CartItem, MerchantMismatchError
from techfood.domain.identifiers import MenuItemId, MerchantId, SessionId
from techfood.domain.value_objects import Money
from techfood.infrastructure import InMemoryCartStore


def _item(menu_item_id="1", price="8.99", quantity=1, merchant_id="1") -> CartItem:
    return CartItem(
        menu_item_id=MenuItemId(menu_item_id),
        name=f"Item {menu_item_id}",
        unit_price=Money.of(price),
        quantity=quantity,
        merchant_id=MerchantId(merchant_id),
    )


class TestAddToCartUseCase:
    """AddToCartUseCaseの単体テスト."""

    def test_空のカートに追加できる(self) -> None:
        """初回の追加でカートが作成・保存されることを確認."""
        store = InMemoryCartStore()
        use_case = AddToCartUseCase(store)
        session_id = SessionId("session-001")

        result = use_case.execute(session_id, _item(quantity=2))

        assert result.merchant_id == MerchantId("1")
        assert result.item_quantity == 2
        assert result.item_count == 2
        assert result.total_amount == Money.of("17.98")
        assert store.load(session_id).get_item_count() == 2

    def test_同じメニュー項目を追加すると数量が加算される(self) -> None:
        store = InMemoryCartStore()
        use_case = AddToCartUseCase(store)
        session_id = SessionId("session-001")

        use_case.execute(session_id, _item(quantity=1))
        result = use_case.execute(session_id, _item(quantity=1))

        assert result.item_quantity == 2
        assert store.load(session_id).get_line_count() == 1

    def test_別の加盟店の商品は追加できずカートは保存されない(self) -> None:
        """MerchantMismatchErrorが伝播し、保存済みのカートが変わらないことを確認."""
        store = InMemoryCartStore()
        use_case = AddToCartUseCase(store)
        session_id = SessionId("session-001")
        use_case.execute(session_id, _item(menu_item_id="1", merchant_id="1"))

        with pytest.raises(MerchantMismatchError):
            use_case.execute(session_id, _item(menu_item_id="3", merchant_id="2"))

        cart = store.load(session_id)
        assert cart.get_merchant_id() == MerchantId("1")
        assert cart.get_item(MenuItemId("3")) is None

    def test_セッションごとにカートは独立している(self) -> None:
        store = InMemoryCartStore()
        use_case = AddToCartUseCase(store)

        use_case.execute(SessionId("session-a"), _item(menu_item_id="1", merchant_id="1"))
        use_case.execute(SessionId("session-b"), _item(menu_item_id="3", merchant_id="2"))

        assert store.load(SessionId("session-a")).get_merchant_id() == MerchantId("1")
        assert store.load(SessionId("session-b")).get_merchant_id() == MerchantId("2")


class TestClearAndAddToCartUseCase:
    """ClearAndAddToCartUseCaseの単体テスト."""

    def test_カートを空にしてから別の加盟店の商品を追加できる(self) -> None:
        store = InMemoryCartStore()
        session_id = SessionId("session-001")
        AddToCartUseCase(store).execute(session_id, _item(menu_item_id="1", merchant_id="1", quantity=3))

        result = ClearAndAddToCartUseCase(store).execute(
            session_id, _item(menu_item_id="3", price="12.50", merchant_id="2")
        )

        assert result.merchant_id == MerchantId("2")
        assert result.item_count == 1
        assert result.total_amount == Money.of("12.50")
        cart = store.load(session_id)
        assert cart.get_item(MenuItemId("1")) is None
