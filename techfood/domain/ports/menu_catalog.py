"""メニューカタログ参照インターフェース（ポート）."""
from abc import ABC, abstractmethod
from dataclasses import dataclass

from ..identifiers import MenuItemId, MerchantId
from ..value_objects import Money


@dataclass(frozen=True)
class MenuItemData:
    """メニュー項目の現在の情報."""

    menu_item_id: MenuItemId
    name: str
    description: str
    price: Money
    merchant_id: MerchantId
    merchant_name: str
    image_url: str = ""


class MenuCatalog(ABC):
    """メニューカタログのインターフェース（カート追加時のみ参照する）."""

    @abstractmethod
    def find_by_id(self, menu_item_id: MenuItemId) -> MenuItemData | None:
        """メニュー項目IDで検索する."""
        pass
