"""DynamoDB 注文リポジトリ実装."""
import logging
import os
from datetime import datetime
from decimal import Decimal
from typing import Any

import boto3
from boto3.dynamodb.conditions import Attr, Key
from botocore.exceptions import BotoCoreError, ClientError

from techfood.domain.entities import Order, OrderItem
from techfood.domain.enums import OrderStatus
from techfood.domain.identifiers import CustomerId, MenuItemId, MerchantId, OrderId
from techfood.domain.ports import OrderRepository, OrderRepositoryError
from techfood.domain.value_objects import DeliveryDetails, Money

from .dynamodb_settings import dynamodb_client_config

logger = logging.getLogger(__name__)


class DynamoDBOrderRepository(OrderRepository):
    """DynamoDB 注文リポジトリ.

    注文と明細を1アイテムにまとめ、条件付き put_item で1回で書き込む。
    """

    def __init__(self, table_name: str | None = None) -> None:
        """初期化."""
        self._table_name = table_name or os.environ.get(
            "ORDER_TABLE_NAME", "techfood-order"
        )
        self._dynamodb = boto3.resource("dynamodb", config=dynamodb_client_config())
        self._table = self._dynamodb.Table(self._table_name)

    def create(self, order: Order) -> None:
        """注文を保存する（同じ注文IDが既に存在する場合は失敗）."""
        item = self._to_dynamodb_item(order)
        try:
            self._table.put_item(
                Item=item,
                ConditionExpression=Attr("order_id").not_exists(),
            )
        except (BotoCoreError, ClientError) as e:
            logger.error(f"Failed to create order {order.order_id}: {e}")
            raise OrderRepositoryError(f"Failed to create order {order.order_id}: {e}") from e

    def find_by_id(self, order_id: OrderId) -> Order | None:
        """注文IDで検索する."""
        try:
            response = self._table.get_item(Key={"order_id": order_id.value})
        except (BotoCoreError, ClientError) as e:
            logger.error(f"Failed to get order {order_id}: {e}")
            raise OrderRepositoryError(f"Failed to get order {order_id}: {e}") from e

        item = response.get("Item")
        if item is None:
            return None
        return self._from_dynamodb_item(item)

    def find_by_customer_id(self, customer_id: CustomerId) -> list[Order]:
        """顧客IDで検索する（GSI使用、注文日時の新しい順）."""
        query_kwargs: dict[str, Any] = {
            "IndexName": "customer_id-index",
            "KeyConditionExpression": Key("customer_id").eq(customer_id.value),
            "ScanIndexForward": False,
        }
        items: list[dict] = []
        try:
            while True:
                response = self._table.query(**query_kwargs)
                items.extend(response.get("Items", []))
                last_key = response.get("LastEvaluatedKey")
                if not last_key:
                    break
                query_kwargs["ExclusiveStartKey"] = last_key
        except (BotoCoreError, ClientError) as e:
            logger.error(f"Failed to query orders for customer {customer_id}: {e}")
            raise OrderRepositoryError(f"Failed to query orders: {e}") from e

        return [self._from_dynamodb_item(item) for item in items]

    @staticmethod
    def _to_dynamodb_item(order: Order) -> dict:
        """Order を DynamoDB アイテムに変換する."""
        delivery: dict = {
            "recipient_name": order.delivery.recipient_name,
            "phone": order.delivery.phone,
            "address": order.delivery.address,
        }
        if order.delivery.notes is not None:
            delivery["notes"] = order.delivery.notes

        items = []
        for line in order.items:
            data = {
                "menu_item_id": line.menu_item_id.value,
                "name": line.name,
                "quantity": line.quantity,
                "unit_price_at_order_time": line.unit_price_at_order_time.value,
                "subtotal": line.subtotal.value,
            }
            if line.special_notes is not None:
                data["special_notes"] = line.special_notes
            items.append(data)

        return {
            "order_id": order.order_id.value,
            "customer_id": order.customer_id.value,
            "merchant_id": order.merchant_id.value,
            "merchant_name": order.merchant_name,
            "status": order.status.value,
            "total": order.total.value,
            "delivery": delivery,
            "items": items,
            "ordered_at": order.ordered_at.isoformat(),
            "updated_at": order.updated_at.isoformat(),
        }

    @staticmethod
    def _from_dynamodb_item(item: dict) -> Order:
        """DynamoDB アイテムから Order を復元する."""
        order_id = OrderId(item["order_id"])
        delivery_data = item.get("delivery", {})
        order_items = tuple(
            OrderItem(
                order_id=order_id,
                menu_item_id=MenuItemId(line["menu_item_id"]),
                name=line.get("name", ""),
                quantity=int(line["quantity"]),
                unit_price_at_order_time=Money(Decimal(str(line["unit_price_at_order_time"]))),
                subtotal=Money(Decimal(str(line["subtotal"]))),
                special_notes=line.get("special_notes"),
            )
            for line in item.get("items", [])
        )

        return Order(
            order_id=order_id,
            customer_id=CustomerId(item["customer_id"]),
            merchant_id=MerchantId(item["merchant_id"]),
            merchant_name=item.get("merchant_name", ""),
            delivery=DeliveryDetails(
                recipient_name=delivery_data.get("recipient_name", ""),
                phone=delivery_data.get("phone", ""),
                address=delivery_data.get("address", ""),
                notes=delivery_data.get("notes"),
            ),
            items=order_items,
            total=Money(Decimal(str(item["total"]))),
            status=OrderStatus(item["status"]),
            ordered_at=datetime.fromisoformat(item["ordered_at"]),
            updated_at=datetime.fromisoformat(item["updated_at"]),
        )
