"""Cartのテスト."""
import pytest

from techfood.domain.entities import Cart, CartItem, MerchantMismatchError
from techfood.domain.identifiers import MenuItemId, MerchantId
from techfood.domain.value_objects import Money


def _item(menu_item_id="1", price="8.99", quantity=1, merchant_id="1", merchant_name="Pizzería Napoli") -> CartItem:
    return CartItem(
        menu_item_id=MenuItemId(menu_item_id),
        name=f"Item {menu_item_id}",
        unit_price=Money.of(price),
        quantity=quantity,
        merchant_id=MerchantId(merchant_id),
        merchant_name=merchant_name,
    )


class TestCart:
    """Cartの単体テスト."""

    def test_新規カートは空(self) -> None:
        cart = Cart.create()
        assert cart.is_empty()
        assert cart.get_item_count() == 0
        assert cart.get_total_amount() == Money.zero()
        assert cart.get_merchant_id() is None
        assert cart.get_merchant_name() == ""

    def test_明細を追加できる(self) -> None:
        cart = Cart.create()
        cart.add_item(_item())
        assert not cart.is_empty()
        assert cart.get_line_count() == 1
        assert cart.get_merchant_id() == MerchantId("1")

    def test_同じメニュー項目は数量が加算される(self) -> None:
        """同一メニュー項目の追加で明細が増えず数量が合算されることを確認."""
        cart = Cart.create()
        cart.add_item(_item(quantity=1))
        merged = cart.add_item(_item(quantity=2))
        assert merged.quantity == 3
        assert cart.get_line_count() == 1
        assert cart.get_item_quantity(MenuItemId("1")) == 3

    def test_合計金額は明細小計の和(self) -> None:
        """8.99 × 2 と 9.99 × 1 の合計が 27.97 になることを確認."""
        cart = Cart.create()
        cart.add_item(_item(menu_item_id="1", price="8.99", quantity=2))
        cart.add_item(_item(menu_item_id="2", price="9.99", quantity=1))
        assert cart.get_total_amount() == Money.of("27.97")
        assert cart.get_item_count() == 3

    def test_別の加盟店の明細を追加するとエラー(self) -> None:
        """加盟店が異なる明細の追加でカートが変更されないことを確認."""
        cart = Cart.create()
        cart.add_item(_item(menu_item_id="1", merchant_id="1"))
        before = cart.get_items()

        with pytest.raises(MerchantMismatchError) as exc_info:
            cart.add_item(_item(menu_item_id="3", merchant_id="2"))

        assert exc_info.value.cart_merchant_id == MerchantId("1")
        assert exc_info.value.item_merchant_id == MerchantId("2")
        assert cart.get_items() == before

    def test_クリア後は別の加盟店の明細を追加できる(self) -> None:
        cart = Cart.create()
        cart.add_item(_item(menu_item_id="1", merchant_id="1"))
        cart.clear()
        cart.add_item(_item(menu_item_id="3", merchant_id="2", merchant_name="Sushi House"))
        assert cart.get_merchant_id() == MerchantId("2")
        assert cart.get_merchant_name() == "Sushi House"

    def test_明細を削除できる(self) -> None:
        cart = Cart.create()
        cart.add_item(_item())
        assert cart.remove_item(MenuItemId("1")) is True
        assert cart.is_empty()
        assert cart.get_merchant_id() is None

    def test_存在しない明細の削除はFalse(self) -> None:
        cart = Cart.create()
        assert cart.remove_item(MenuItemId("999")) is False

    def test_数量を変更できる(self) -> None:
        cart = Cart.create()
        cart.add_item(_item())
        assert cart.set_quantity(MenuItemId("1"), 4) is True
        assert cart.get_item_quantity(MenuItemId("1")) == 4
        assert cart.get_total_amount() == Money.of("35.96")

    def test_数量0への変更は削除と同じ(self) -> None:
        cart = Cart.create()
        cart.add_item(_item())
        assert cart.set_quantity(MenuItemId("1"), 0) is True
        assert cart.get_item(MenuItemId("1")) is None
        assert cart.is_empty()

    def test_存在しない明細の数量変更はFalse(self) -> None:
        cart = Cart.create()
        assert cart.set_quantity(MenuItemId("1"), 2) is False
        assert cart.is_empty()

    def test_明細のリストは防御的コピー(self) -> None:
        cart = Cart.create()
        cart.add_item(_item())
        items = cart.get_items()
        items.clear()
        assert cart.get_line_count() == 1

    def test_変更するとupdated_atが更新される(self) -> None:
        cart = Cart.create()
        before = cart.updated_at
        cart.add_item(_item())
        assert cart.updated_at >= before

    def test_カートにない明細の数量は0(self) -> None:
        assert Cart.create().get_item_quantity(MenuItemId("1")) == 0
