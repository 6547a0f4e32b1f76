"""カートストアのDynamoDB実装."""
import logging
import os
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from techfood.domain.entities import Cart, CartItem
from techfood.domain.identifiers import MenuItemId, MerchantId, SessionId
from techfood.domain.ports import CartStore, CartStoreUnavailableError
from techfood.domain.value_objects import Money

from .dynamodb_settings import dynamodb_client_config

logger = logging.getLogger(__name__)

# TTL: セッションの有効期限に合わせる
DEFAULT_TTL_HOURS = 24


class DynamoDBCartStore(CartStore):
    """カートストアのDynamoDB実装.

    1セッション = 1アイテム。put_item でカート全体を丸ごと置き換える。
    """

    def __init__(self, table_name: str | None = None) -> None:
        """初期化."""
        self._table_name = table_name or os.environ.get(
            "CART_TABLE_NAME", "techfood-cart"
        )
        self._ttl_hours = int(os.environ.get("CART_TTL_HOURS", DEFAULT_TTL_HOURS))
        self._dynamodb = boto3.resource("dynamodb", config=dynamodb_client_config())
        self._table = self._dynamodb.Table(self._table_name)

    def load(self, session_id: SessionId) -> Cart:
        """カートを読み込む（存在しない場合は空のカート）."""
        try:
            response = self._table.get_item(Key={"session_id": session_id.value})
        except (BotoCoreError, ClientError) as e:
            logger.error(f"Failed to load cart for session {session_id}: {e}")
            raise CartStoreUnavailableError(f"Failed to load cart: {e}") from e

        item = response.get("Item")
        if item is None:
            return Cart.create()
        return self._from_dynamodb_item(item)

    def save(self, session_id: SessionId, cart: Cart) -> None:
        """カートを保存する."""
        item = self._to_dynamodb_item(session_id, cart, self._ttl_hours)
        try:
            self._table.put_item(Item=item)
        except (BotoCoreError, ClientError) as e:
            logger.error(f"Failed to save cart for session {session_id}: {e}")
            raise CartStoreUnavailableError(f"Failed to save cart: {e}") from e

    def clear(self, session_id: SessionId) -> None:
        """カートを破棄する."""
        try:
            self._table.delete_item(Key={"session_id": session_id.value})
        except (BotoCoreError, ClientError) as e:
            logger.error(f"Failed to clear cart for session {session_id}: {e}")
            raise CartStoreUnavailableError(f"Failed to clear cart: {e}") from e

    @staticmethod
    def _to_dynamodb_item(
        session_id: SessionId, cart: Cart, ttl_hours: int = DEFAULT_TTL_HOURS
    ) -> dict[str, Any]:
        """CartエンティティをDynamoDBアイテムに変換."""
        ttl = int((datetime.now(timezone.utc) + timedelta(hours=ttl_hours)).timestamp())

        items = []
        for item in cart.get_items():
            data = {
                "menu_item_id": item.menu_item_id.value,
                "name": item.name,
                "description": item.description,
                "image_url": item.image_url,
                # 金額は Decimal のまま保存し、丸め誤差なく往復させる
                "unit_price": item.unit_price.value,
                "quantity": item.quantity,
                "merchant_id": item.merchant_id.value,
                "merchant_name": item.merchant_name,
            }
            if item.special_notes is not None:
                data["special_notes"] = item.special_notes
            items.append(data)

        return {
            "session_id": session_id.value,
            "items": items,
            "created_at": cart.created_at.isoformat(),
            "updated_at": cart.updated_at.isoformat(),
            "ttl": ttl,
        }

    @staticmethod
    def _from_dynamodb_item(item: dict[str, Any]) -> Cart:
        """DynamoDBアイテムをCartエンティティに変換."""
        cart_items = [
            CartItem(
                menu_item_id=MenuItemId(data["menu_item_id"]),
                name=data["name"],
                description=data.get("description", ""),
                image_url=data.get("image_url", ""),
                unit_price=Money(Decimal(str(data["unit_price"]))),
                quantity=int(data["quantity"]),
                merchant_id=MerchantId(data["merchant_id"]),
                merchant_name=data.get("merchant_name", ""),
                special_notes=data.get("special_notes"),
            )
            for data in item.get("items", [])
        ]

        now = datetime.now(timezone.utc)
        created_at = item.get("created_at")
        updated_at = item.get("updated_at")
        return Cart(
            _items=cart_items,
            created_at=datetime.fromisoformat(created_at) if created_at else now,
            updated_at=datetime.fromisoformat(updated_at) if updated_at else now,
        )
