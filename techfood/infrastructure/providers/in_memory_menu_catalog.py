"""インメモリのメニューカタログ."""
from techfood.domain.identifiers import MenuItemId, MerchantId
from techfood.domain.ports import MenuCatalog, MenuItemData
from techfood.domain.value_objects import Money

# 開発・デモ用の初期データ
SEED_MENU_ITEMS = [
    MenuItemData(
        menu_item_id=MenuItemId("1"),
        name="Pizza Margherita",
        description="Tomate, mozzarella, albahaca",
        price=Money.of("8.99"),
        merchant_id=MerchantId("1"),
        merchant_name="Pizzería Napoli",
        image_url="margherita.jpg",
    ),
    MenuItemData(
        menu_item_id=MenuItemId("2"),
        name="Pizza Pepperoni",
        description="Mozzarella y pepperoni",
        price=Money.of("9.99"),
        merchant_id=MerchantId("1"),
        merchant_name="Pizzería Napoli",
        image_url="spepperoni.jpg",
    ),
    MenuItemData(
        menu_item_id=MenuItemId("3"),
        name="Sushi Roll de Salmón",
        description="Rollos con salmón fresco",
        price=Money.of("12.50"),
        merchant_id=MerchantId("2"),
        merchant_name="Sushi House",
        image_url="salmon-roll.jpg",
    ),
]


class InMemoryMenuCatalog(MenuCatalog):
    """インメモリのメニューカタログ（開発・テスト用）."""

    def __init__(self, menu_items: list[MenuItemData] | None = None) -> None:
        """初期化（省略時は初期データを登録）."""
        self._menu_items: dict[str, MenuItemData] = {}
        for menu_item in SEED_MENU_ITEMS if menu_items is None else menu_items:
            self.register(menu_item)

    def register(self, menu_item: MenuItemData) -> None:
        """メニュー項目を登録する（同じIDは上書き）."""
        self._menu_items[menu_item.menu_item_id.value] = menu_item

    def find_by_id(self, menu_item_id: MenuItemId) -> MenuItemData | None:
        """メニュー項目IDで検索する."""
        return self._menu_items.get(menu_item_id.value)
