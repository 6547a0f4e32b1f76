"""カート集約ルート."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from ..identifiers import MenuItemId, MerchantId
from ..value_objects import Money

from .cart_item import CartItem


class MerchantMismatchError(Exception):
    """別の加盟店の商品をカートに混在させようとしたエラー."""

    def __init__(self, cart_merchant_id: MerchantId, item_merchant_id: MerchantId) -> None:
        self.cart_merchant_id = cart_merchant_id
        self.item_merchant_id = item_merchant_id
        super().__init__(
            f"Cart already holds items from merchant {cart_merchant_id}; "
            f"clear the cart before adding items from merchant {item_merchant_id}"
        )


@dataclass
class Cart:
    """1セッション分の注文候補を保持するコンテナ（集約ルート）.

    空でないカートの明細はすべて同じ加盟店に属する。
    合計金額・点数・加盟店は保持せず、読み出し時に明細から計算する。
    """

    _items: list[CartItem] = field(default_factory=list)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(cls) -> Cart:
        """新しい空のカートを作成する."""
        now = datetime.now(timezone.utc)
        return cls(_items=[], created_at=now, updated_at=now)

    def add_item(self, item: CartItem) -> CartItem:
        """明細を追加する.

        同じメニュー項目の明細があれば数量を加算し、なければ末尾に追加する。

        Returns:
            追加・加算後の明細

        Raises:
            MerchantMismatchError: カートが別の加盟店の明細を保持している場合（カートは変更されない）
        """
        cart_merchant_id = self.get_merchant_id()
        if cart_merchant_id is not None and cart_merchant_id != item.merchant_id:
            raise MerchantMismatchError(cart_merchant_id, item.merchant_id)

        index = self._index_of(item.menu_item_id)
        if index is None:
            merged = item
            self._items.append(merged)
        else:
            existing = self._items[index]
            merged = existing.with_quantity(existing.quantity + item.quantity)
            self._items[index] = merged
        self._touch()
        return merged

    def remove_item(self, menu_item_id: MenuItemId) -> bool:
        """指定メニュー項目の明細を削除する（存在しない場合は何もしない）."""
        index = self._index_of(menu_item_id)
        if index is None:
            return False
        self._items.pop(index)
        self._touch()
        return True

    def set_quantity(self, menu_item_id: MenuItemId, quantity: int) -> bool:
        """明細の数量を上書きする.

        0以下の数量は remove_item と同じ扱い。明細が存在しない場合は何もしない。
        """
        index = self._index_of(menu_item_id)
        if index is None:
            return False
        if quantity <= 0:
            return self.remove_item(menu_item_id)
        self._items[index] = self._items[index].with_quantity(quantity)
        self._touch()
        return True

    def clear(self) -> None:
        """全明細を削除する."""
        self._items.clear()
        self._touch()

    def get_total_amount(self) -> Money:
        """合計金額を計算する."""
        total = Money.zero()
        for item in self._items:
            total = total.add(item.get_line_subtotal())
        return total

    def get_item_count(self) -> int:
        """商品点数（数量の合計）を取得する."""
        return sum(item.quantity for item in self._items)

    def get_line_count(self) -> int:
        """明細行数を取得する."""
        return len(self._items)

    def get_merchant_id(self) -> MerchantId | None:
        """カートの加盟店IDを取得する（空の場合はNone）."""
        if not self._items:
            return None
        return self._items[0].merchant_id

    def get_merchant_name(self) -> str:
        """カートの加盟店名を取得する（空の場合は空文字）."""
        if not self._items:
            return ""
        return self._items[0].merchant_name

    def is_empty(self) -> bool:
        """カートが空か判定する."""
        return len(self._items) == 0

    def get_items(self) -> list[CartItem]:
        """明細のリストを取得（防御的コピー）."""
        return list(self._items)

    def get_item(self, menu_item_id: MenuItemId) -> CartItem | None:
        """指定メニュー項目の明細を取得する."""
        index = self._index_of(menu_item_id)
        return None if index is None else self._items[index]

    def get_item_quantity(self, menu_item_id: MenuItemId) -> int:
        """指定メニュー項目の数量を取得する（存在しない場合は0）."""
        item = self.get_item(menu_item_id)
        return 0 if item is None else item.quantity

    def _index_of(self, menu_item_id: MenuItemId) -> int | None:
        for i, item in enumerate(self._items):
            if item.menu_item_id == menu_item_id:
                return i
        return None

    def _touch(self) -> None:
        self.updated_at = datetime.now(timezone.utc)
