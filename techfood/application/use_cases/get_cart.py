"""カート取得ユースケース."""
from dataclasses import dataclass
from typing import Optional

from techfood.domain.identifiers import SessionId
from techfood.domain.ports import CartStore
from techfood.domain.value_objects import Money


@dataclass(frozen=True)
class CartItemDTO:
    """カート明細DTO."""

    menu_item_id: str
    name: str
    description: str
    image_url: str
    unit_price: Money
    quantity: int
    line_subtotal: Money
    special_notes: Optional[str]


@dataclass(frozen=True)
class GetCartResult:
    """カート取得結果."""

    items: list[CartItemDTO]
    merchant_id: Optional[str]
    merchant_name: str
    item_count: int
    total_amount: Money
    is_empty: bool


class GetCartUseCase:
    """カート取得ユースケース."""

    def __init__(self, cart_store: CartStore) -> None:
        """初期化.

        Args:
            cart_store: カートストア
        """
        self._cart_store = cart_store

    def execute(self, session_id: SessionId) -> GetCartResult:
        """カートを取得する（未作成のセッションは空のカート）."""
        cart = self._cart_store.load(session_id)

        items = [
            CartItemDTO(
                menu_item_id=str(item.menu_item_id),
                name=item.name,
                description=item.description,
                image_url=item.image_url,
                unit_price=item.unit_price,
                quantity=item.quantity,
                line_subtotal=item.get_line_subtotal(),
                special_notes=item.special_notes,
            )
            for item in cart.get_items()
        ]
        merchant_id = cart.get_merchant_id()

        return GetCartResult(
            items=items,
            merchant_id=None if merchant_id is None else str(merchant_id),
            merchant_name=cart.get_merchant_name(),
            item_count=cart.get_item_count(),
            total_amount=cart.get_total_amount(),
            is_empty=cart.is_empty(),
        )
