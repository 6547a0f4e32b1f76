"""UpdateCartItemQuantityUseCaseのテスト."""
from techfood.application.use_cases import AddToCartUseCase, UpdateCartItemQuantityUseCase
from techfood.domain.entities import CartItem
from techfood.domain.identifiers import MenuItemId, MerchantId, SessionId
from techfood.domain.value_objects import Money
from techfood.infrastructure import InMemoryCartStore


def _prepare_store(session_id: SessionId) -> InMemoryCartStore:
    store = InMemoryCartStore()
    AddToCartUseCase(store).execute(
        session_id,
        CartItem(
            menu_item_id=MenuItemId("1"),
            name="Pizza Margherita",
            unit_price=Money.of("8.99"),
            quantity=1,
            merchant_id=MerchantId("1"),
        ),
    )
    return store


class TestUpdateCartItemQuantityUseCase:
    """UpdateCartItemQuantityUseCaseの単体テスト."""

    def test_数量を変更できる(self) -> None:
        session_id = SessionId("session-001")
        store = _prepare_store(session_id)

        result = UpdateCartItemQuantityUseCase(store).execute(session_id, MenuItemId("1"), 3)

        assert result.updated is True
        assert result.removed is False
        assert result.item_quantity == 3
        assert result.item_subtotal == Money.of("26.97")
        assert result.total_amount == Money.of("26.97")
        assert store.load(session_id).get_item_quantity(MenuItemId("1")) == 3

    def test_数量0で明細が削除される(self) -> None:
        session_id = SessionId("session-001")
        store = _prepare_store(session_id)

        result = UpdateCartItemQuantityUseCase(store).execute(session_id, MenuItemId("1"), 0)

        assert result.updated is True
        assert result.removed is True
        assert result.item_quantity == 0
        assert result.item_subtotal == Money.zero()
        assert store.load(session_id).is_empty()

    def test_存在しない明細は変更されない(self) -> None:
        session_id = SessionId("session-001")
        store = _prepare_store(session_id)

        result = UpdateCartItemQuantityUseCase(store).execute(session_id, MenuItemId("999"), 2)

        assert result.updated is False
        assert result.removed is False
        assert result.item_count == 1
