"""カート内アイテムエンティティ."""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Optional

from ..identifiers import MenuItemId, MerchantId
from ..value_objects import Money

if TYPE_CHECKING:
    from ..ports.menu_catalog import MenuItemData


@dataclass(frozen=True)
class CartItem:
    """カートに追加された1商品分の明細（Cart集約内でのみ意味を持つ）.

    unit_price は追加時点の価格のスナップショットで、
    後からカタログ価格が変わってもカート内の金額は変わらない。
    """

    menu_item_id: MenuItemId
    name: str
    unit_price: Money
    quantity: int
    merchant_id: MerchantId
    merchant_name: str = ""  # 表示用キャッシュ
    description: str = ""  # 表示用キャッシュ
    image_url: str = ""  # 表示用キャッシュ
    special_notes: Optional[str] = None

    def __post_init__(self) -> None:
        """バリデーション."""
        if not self.name:
            raise ValueError("Item name cannot be empty")
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise ValueError("Quantity must be an integer")
        if self.quantity < 1:
            raise ValueError("Quantity must be at least 1")

    @classmethod
    def from_menu_item(
        cls,
        menu_item: MenuItemData,
        quantity: int = 1,
        special_notes: str | None = None,
    ) -> CartItem:
        """カタログのメニュー項目から価格スナップショット付きの明細を作成する."""
        return cls(
            menu_item_id=menu_item.menu_item_id,
            name=menu_item.name,
            description=menu_item.description,
            unit_price=menu_item.price,
            quantity=quantity,
            merchant_id=menu_item.merchant_id,
            merchant_name=menu_item.merchant_name,
            image_url=menu_item.image_url,
            special_notes=special_notes,
        )

    def get_line_subtotal(self) -> Money:
        """明細の小計（単価 × 数量）."""
        return self.unit_price.multiply(self.quantity)

    def with_quantity(self, quantity: int) -> CartItem:
        """数量を変更した新しい明細を返す."""
        return replace(self, quantity=quantity)
