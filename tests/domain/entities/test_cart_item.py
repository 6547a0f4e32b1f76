"""CartItemのテスト."""
import pytest

from techfood.domain.entities import CartItem
from techfood.domain.identifiers import MenuItemId, MerchantId
from techfood.domain.ports import MenuItemData
from techfood.domain.value_objects import Money


def _item(quantity=1) -> CartItem:
    return CartItem(
        menu_item_id=MenuItemId("1"),
        name="Pizza Margherita",
        unit_price=Money.of("8.99"),
        quantity=quantity,
        merchant_id=MerchantId("1"),
    )


class TestCartItem:
    """CartItemの単体テスト."""

    def test_小計は単価と数量の積(self) -> None:
        assert _item(quantity=3).get_line_subtotal() == Money.of("26.97")

    def test_数量0で生成するとエラー(self) -> None:
        with pytest.raises(ValueError, match="at least 1"):
            _item(quantity=0)

    def test_数量にboolを指定するとエラー(self) -> None:
        with pytest.raises(ValueError, match="integer"):
            _item(quantity=True)

    def test_名前が空だとエラー(self) -> None:
        with pytest.raises(ValueError, match="name cannot be empty"):
            CartItem(
                menu_item_id=MenuItemId("1"),
                name="",
                unit_price=Money.of("1.00"),
                quantity=1,
                merchant_id=MerchantId("1"),
            )

    def test_with_quantityは新しい明細を返す(self) -> None:
        """元の明細は変更されないことを確認."""
        item = _item(quantity=1)
        updated = item.with_quantity(5)
        assert updated.quantity == 5
        assert item.quantity == 1
        assert updated.menu_item_id == item.menu_item_id

    def test_メニュー項目から価格スナップショット付きで生成できる(self) -> None:
        menu_item = MenuItemData(
            menu_item_id=MenuItemId("3"),
            name="Sushi Roll de Salmón",
            description="Rollos con salmón fresco",
            price=Money.of("12.50"),
            merchant_id=MerchantId("2"),
            merchant_name="Sushi House",
            image_url="salmon-roll.jpg",
        )

        item = CartItem.from_menu_item(menu_item, quantity=2, special_notes="わさび抜き")

        assert item.menu_item_id == MenuItemId("3")
        assert item.unit_price == Money.of("12.50")
        assert item.quantity == 2
        assert item.merchant_id == MerchantId("2")
        assert item.merchant_name == "Sushi House"
        assert item.image_url == "salmon-roll.jpg"
        assert item.special_notes == "わさび抜き"
