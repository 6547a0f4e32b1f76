"""カートAPI ハンドラー."""
import logging
from typing import Any

from techfood.api.dependencies import Dependencies
from techfood.api.request import get_body, get_path_parameter, get_session_id
from techfood.api.response import (
    bad_request_response,
    conflict_response,
    not_found_response,
    service_unavailable_response,
    success_response,
)
from techfood.application.use_cases import (
    AddToCartResult,
    AddToCartUseCase,
    ClearAndAddToCartUseCase,
    ClearCartUseCase,
    GetCartSummaryUseCase,
    GetCartUseCase,
    GetItemQuantityUseCase,
    RemoveFromCartUseCase,
    UpdateCartItemQuantityUseCase,
)
from techfood.domain.entities import CartItem, MerchantMismatchError
from techfood.domain.identifiers import MenuItemId
from techfood.domain.ports import CartStoreUnavailableError

logger = logging.getLogger(__name__)

SPECIAL_NOTES_MAX_LENGTH = 500


def _session_required_response(event: dict) -> dict:
    return bad_request_response(
        "X-Session-Id header is required", error_code="SESSION_REQUIRED", event=event
    )


def _cart_store_unavailable_response(event: dict) -> dict:
    return service_unavailable_response(
        "Cart is temporarily unavailable, please retry",
        error_code="CART_STORE_UNAVAILABLE",
        event=event,
    )


def _parse_cart_item(body: dict) -> CartItem | None:
    """リクエストボディからカタログを引いて CartItem を組み立てる.

    Returns:
        CartItem（メニューアイテムがカタログにない場合はNone）

    Raises:
        ValueError: 入力が不正な場合
    """
    raw_id = body.get("menu_item_id")
    if not isinstance(raw_id, str) or not raw_id.strip():
        raise ValueError("menu_item_id must be a non-empty string")

    quantity = body.get("quantity", 1)
    if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
        raise ValueError("quantity must be a positive integer")

    special_notes = body.get("special_notes")
    if special_notes is not None:
        if not isinstance(special_notes, str):
            raise ValueError("special_notes must be a string")
        if len(special_notes) > SPECIAL_NOTES_MAX_LENGTH:
            raise ValueError(f"special_notes must be at most {SPECIAL_NOTES_MAX_LENGTH} characters")
        special_notes = special_notes.strip() or None

    menu_item = Dependencies.get_menu_catalog().find_by_id(MenuItemId(raw_id.strip()))
    if menu_item is None:
        return None
    return CartItem.from_menu_item(menu_item, quantity=quantity, special_notes=special_notes)


def _add_result_body(result: AddToCartResult) -> dict:
    return {
        "merchant_id": str(result.merchant_id),
        "item_quantity": result.item_quantity,
        "item_count": result.item_count,
        "total_amount": result.total_amount.to_string(),
    }


def add_to_cart(event: dict, context: Any) -> dict:
    """メニューアイテムをカートに追加する.

    POST /cart/items

    Headers:
        X-Session-Id: セッションID

    Request Body:
        menu_item_id: メニューアイテムID
        quantity: 数量（オプション、デフォルト1）
        special_notes: 特記事項（オプション）

    Returns:
        追加結果。別の店舗の商品がカートにある場合は 409（requires_clear=true）
    """
    session_id = get_session_id(event)
    if session_id is None:
        return _session_required_response(event)

    try:
        body = get_body(event)
    except ValueError as e:
        return bad_request_response(str(e), event=event)

    try:
        item = _parse_cart_item(body)
    except ValueError as e:
        return bad_request_response(str(e), event=event)
    if item is None:
        return not_found_response("Menu item", event=event)

    use_case = AddToCartUseCase(Dependencies.get_cart_store())
    try:
        result = use_case.execute(session_id, item)
    except MerchantMismatchError as e:
        return conflict_response(
            "Cart already contains items from another merchant",
            error_code="MERCHANT_MISMATCH",
            event=event,
            details={
                "requires_clear": True,
                "cart_merchant_id": str(e.cart_merchant_id),
                "item_merchant_id": str(e.item_merchant_id),
            },
        )
    except CartStoreUnavailableError as e:
        logger.exception("CartStoreUnavailableError: %s", e)
        return _cart_store_unavailable_response(event)

    return success_response(_add_result_body(result), status_code=201, event=event)


def clear_and_add_to_cart(event: dict, context: Any) -> dict:
    """カートを空にしてからメニューアイテムを追加する.

    POST /cart/items/replace

    別の店舗の商品を追加するときに、利用者が確認した後で呼び出す。
    リクエストボディは add_to_cart と同じ。
    """
    session_id = get_session_id(event)
    if session_id is None:
        return _session_required_response(event)

    try:
        body = get_body(event)
    except ValueError as e:
        return bad_request_response(str(e), event=event)

    try:
        item = _parse_cart_item(body)
    except ValueError as e:
        return bad_request_response(str(e), event=event)
    if item is None:
        return not_found_response("Menu item", event=event)

    use_case = ClearAndAddToCartUseCase(Dependencies.get_cart_store())
    try:
        result = use_case.execute(session_id, item)
    except CartStoreUnavailableError as e:
        logger.exception("CartStoreUnavailableError: %s", e)
        return _cart_store_unavailable_response(event)

    return success_response(_add_result_body(result), status_code=201, event=event)


def update_cart_item_quantity(event: dict, context: Any) -> dict:
    """明細の数量を変更する（0 は削除）.

    PUT /cart/items/{menu_item_id}

    Request Body:
        quantity: 新しい数量
    """
    session_id = get_session_id(event)
    if session_id is None:
        return _session_required_response(event)

    menu_item_id_str = get_path_parameter(event, "menu_item_id")
    if not menu_item_id_str:
        return bad_request_response("menu_item_id is required", event=event)

    try:
        body = get_body(event)
    except ValueError as e:
        return bad_request_response(str(e), event=event)

    quantity = body.get("quantity")
    if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 0:
        return bad_request_response("quantity must be a non-negative integer", event=event)

    use_case = UpdateCartItemQuantityUseCase(Dependencies.get_cart_store())
    try:
        result = use_case.execute(session_id, MenuItemId(menu_item_id_str), quantity)
    except CartStoreUnavailableError as e:
        logger.exception("CartStoreUnavailableError: %s", e)
        return _cart_store_unavailable_response(event)

    if not result.updated:
        return not_found_response("Cart item", event=event)

    return success_response(
        {
            "removed": result.removed,
            "item_quantity": result.item_quantity,
            "item_subtotal": result.item_subtotal.to_string(),
            "item_count": result.item_count,
            "total_amount": result.total_amount.to_string(),
        },
        event=event,
    )


def remove_from_cart(event: dict, context: Any) -> dict:
    """カートから明細を削除する.

    DELETE /cart/items/{menu_item_id}
    """
    session_id = get_session_id(event)
    if session_id is None:
        return _session_required_response(event)

    menu_item_id_str = get_path_parameter(event, "menu_item_id")
    if not menu_item_id_str:
        return bad_request_response("menu_item_id is required", event=event)

    use_case = RemoveFromCartUseCase(Dependencies.get_cart_store())
    try:
        result = use_case.execute(session_id, MenuItemId(menu_item_id_str))
    except CartStoreUnavailableError as e:
        logger.exception("CartStoreUnavailableError: %s", e)
        return _cart_store_unavailable_response(event)

    if not result.removed:
        return not_found_response("Cart item", event=event)

    return success_response(
        {
            "item_count": result.item_count,
            "total_amount": result.total_amount.to_string(),
            "is_empty": result.is_empty,
        },
        event=event,
    )


def clear_cart(event: dict, context: Any) -> dict:
    """カートを空にする.

    DELETE /cart
    """
    session_id = get_session_id(event)
    if session_id is None:
        return _session_required_response(event)

    use_case = ClearCartUseCase(Dependencies.get_cart_store())
    try:
        use_case.execute(session_id)
    except CartStoreUnavailableError as e:
        logger.exception("CartStoreUnavailableError: %s", e)
        return _cart_store_unavailable_response(event)

    return success_response({"item_count": 0, "total_amount": "0.00", "is_empty": True}, event=event)


def get_cart(event: dict, context: Any) -> dict:
    """カートを取得する.

    GET /cart

    Returns:
        明細一覧・店舗・合計金額
    """
    session_id = get_session_id(event)
    if session_id is None:
        return _session_required_response(event)

    use_case = GetCartUseCase(Dependencies.get_cart_store())
    try:
        result = use_case.execute(session_id)
    except CartStoreUnavailableError as e:
        logger.exception("CartStoreUnavailableError: %s", e)
        return _cart_store_unavailable_response(event)

    items = [
        {
            "menu_item_id": item.menu_item_id,
            "name": item.name,
            "description": item.description,
            "image_url": item.image_url,
            "unit_price": item.unit_price.to_string(),
            "quantity": item.quantity,
            "line_subtotal": item.line_subtotal.to_string(),
            "special_notes": item.special_notes,
        }
        for item in result.items
    ]

    return success_response(
        {
            "items": items,
            "merchant_id": result.merchant_id,
            "merchant_name": result.merchant_name,
            "item_count": result.item_count,
            "total_amount": result.total_amount.to_string(),
            "is_empty": result.is_empty,
        },
        event=event,
    )


def get_cart_summary(event: dict, context: Any) -> dict:
    """ヘッダー表示用のカート概要を取得する.

    GET /cart/summary
    """
    session_id = get_session_id(event)
    if session_id is None:
        return _session_required_response(event)

    use_case = GetCartSummaryUseCase(Dependencies.get_cart_store())
    try:
        result = use_case.execute(session_id)
    except CartStoreUnavailableError as e:
        logger.exception("CartStoreUnavailableError: %s", e)
        return _cart_store_unavailable_response(event)

    return success_response(
        {
            "has_items": result.has_items,
            "merchant_id": result.merchant_id,
            "merchant_name": result.merchant_name,
            "item_count": result.item_count,
        },
        event=event,
    )


def get_item_quantity(event: dict, context: Any) -> dict:
    """メニューアイテムのカート内数量を取得する（カートにない場合は0）.

    GET /cart/items/{menu_item_id}
    """
    session_id = get_session_id(event)
    if session_id is None:
        return _session_required_response(event)

    menu_item_id_str = get_path_parameter(event, "menu_item_id")
    if not menu_item_id_str:
        return bad_request_response("menu_item_id is required", event=event)

    use_case = GetItemQuantityUseCase(Dependencies.get_cart_store())
    try:
        quantity = use_case.execute(session_id, MenuItemId(menu_item_id_str))
    except CartStoreUnavailableError as e:
        logger.exception("CartStoreUnavailableError: %s", e)
        return _cart_store_unavailable_response(event)

    return success_response({"menu_item_id": menu_item_id_str, "quantity": quantity}, event=event)
