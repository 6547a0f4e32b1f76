"""カートAPIハンドラーのテスト."""
import json

import pytest

from techfood.api.dependencies import Dependencies
from techfood.api.handlers.cart import (
    add_to_cart,
    clear_and_add_to_cart,
    clear_cart,
    get_cart,
    get_cart_summary,
    get_item_quantity,
    remove_from_cart,
    update_cart_item_quantity,
)
from techfood.domain.identifiers import MenuItemId, SessionId
from techfood.domain.ports import CartStoreUnavailableError
from techfood.infrastructure import InMemoryCartStore, InMemoryMenuCatalog

SESSION_ID = "session-001"


@pytest.fixture(autouse=True)
def reset_dependencies():
    """各テスト前に依存性をリセット."""
    Dependencies.reset()
    yield
    Dependencies.reset()


@pytest.fixture
def cart_store() -> InMemoryCartStore:
    store = InMemoryCartStore()
    Dependencies.set_cart_store(store)
    Dependencies.set_menu_catalog(InMemoryMenuCatalog())
    return store


def _event(body: dict | None = None, path: dict | None = None, session_id: str | None = SESSION_ID) -> dict:
    headers = {}
    if session_id is not None:
        headers["X-Session-Id"] = session_id
    return {
        "headers": headers,
        "pathParameters": path,
        "body": json.dumps(body) if body is not None else None,
    }


def _add(menu_item_id: str, quantity: int = 1) -> dict:
    return add_to_cart(_event({"menu_item_id": menu_item_id, "quantity": quantity}), None)


class TestAddToCartHandler:
    """POST /cart/items のテスト."""

    def test_カタログの商品をカートに追加できる(self, cart_store) -> None:
        response = _add("1", quantity=2)

        assert response["statusCode"] == 201
        body = json.loads(response["body"])
        assert body["merchant_id"] == "1"
        assert body["item_quantity"] == 2
        assert body["item_count"] == 2
        assert body["total_amount"] == "17.98"

    def test_数量省略時は1個追加される(self, cart_store) -> None:
        response = add_to_cart(_event({"menu_item_id": "2"}), None)
        assert json.loads(response["body"])["item_quantity"] == 1

    def test_特記事項が保存される(self, cart_store) -> None:
        add_to_cart(_event({"menu_item_id": "1", "special_notes": " よく焼き "}), None)
        item = cart_store.load(SessionId(SESSION_ID)).get_item(MenuItemId("1"))
        assert item.special_notes == "よく焼き"

    def test_セッションIDがないと400(self, cart_store) -> None:
        response = add_to_cart(_event({"menu_item_id": "1"}, session_id=None), None)
        assert response["statusCode"] == 400
        assert json.loads(response["body"])["error"]["code"] == "SESSION_REQUIRED"

    def test_存在しない商品は404(self, cart_store) -> None:
        response = _add("999")
        assert response["statusCode"] == 404

    @pytest.mark.parametrize("quantity", [0, -1, True, "2", 1.5])
    def test_不正な数量は400(self, cart_store, quantity) -> None:
        response = _add("1", quantity=quantity)
        assert response["statusCode"] == 400

    def test_menu_item_idがないと400(self, cart_store) -> None:
        response = add_to_cart(_event({"quantity": 1}), None)
        assert response["statusCode"] == 400

    def test_不正なJSONは400(self, cart_store) -> None:
        event = _event()
        event["body"] = "{broken"
        assert add_to_cart(event, None)["statusCode"] == 400

    def test_別の店舗の商品は409でカートのクリアを促す(self, cart_store) -> None:
        """加盟店が異なる商品の追加で 409 と requires_clear が返ることを確認."""
        _add("1")

        response = _add("3")

        assert response["statusCode"] == 409
        error = json.loads(response["body"])["error"]
        assert error["code"] == "MERCHANT_MISMATCH"
        assert error["requires_clear"] is True
        assert error["cart_merchant_id"] == "1"
        assert error["item_merchant_id"] == "2"
        assert cart_store.load(SessionId(SESSION_ID)).get_item(MenuItemId("3")) is None

    def test_カートストア障害は503(self, cart_store, monkeypatch) -> None:
        def _fail(session_id):
            raise CartStoreUnavailableError("timeout")

        monkeypatch.setattr(cart_store, "load", _fail)

        response = _add("1")

        assert response["statusCode"] == 503
        assert json.loads(response["body"])["error"]["code"] == "CART_STORE_UNAVAILABLE"


class TestClearAndAddToCartHandler:
    """POST /cart/items/replace のテスト."""

    def test_カートを空にして別の店舗の商品を追加できる(self, cart_store) -> None:
        _add("1", quantity=2)

        response = clear_and_add_to_cart(_event({"menu_item_id": "3"}), None)

        assert response["statusCode"] == 201
        body = json.loads(response["body"])
        assert body["merchant_id"] == "2"
        assert body["item_count"] == 1
        assert body["total_amount"] == "12.50"

    def test_存在しない商品は404でカートは変わらない(self, cart_store) -> None:
        _add("1")
        response = clear_and_add_to_cart(_event({"menu_item_id": "999"}), None)
        assert response["statusCode"] == 404
        assert cart_store.load(SessionId(SESSION_ID)).get_item_count() == 1


class TestUpdateCartItemQuantityHandler:
    """PUT /cart/items/{menu_item_id} のテスト."""

    def test_数量を変更できる(self, cart_store) -> None:
        _add("1")

        response = update_cart_item_quantity(_event({"quantity": 3}, path={"menu_item_id": "1"}), None)

        assert response["statusCode"] == 200
        body = json.loads(response["body"])
        assert body["item_quantity"] == 3
        assert body["item_subtotal"] == "26.97"
        assert body["removed"] is False

    def test_数量0で削除される(self, cart_store) -> None:
        _add("1")
        response = update_cart_item_quantity(_event({"quantity": 0}, path={"menu_item_id": "1"}), None)
        body = json.loads(response["body"])
        assert body["removed"] is True
        assert body["item_count"] == 0

    def test_カートにない商品は404(self, cart_store) -> None:
        response = update_cart_item_quantity(_event({"quantity": 1}, path={"menu_item_id": "1"}), None)
        assert response["statusCode"] == 404

    def test_負の数量は400(self, cart_store) -> None:
        response = update_cart_item_quantity(_event({"quantity": -1}, path={"menu_item_id": "1"}), None)
        assert response["statusCode"] == 400


class TestRemoveFromCartHandler:
    """DELETE /cart/items/{menu_item_id} のテスト."""

    def test_明細を削除できる(self, cart_store) -> None:
        _add("1")
        _add("2")

        response = remove_from_cart(_event(path={"menu_item_id": "1"}), None)

        assert response["statusCode"] == 200
        body = json.loads(response["body"])
        assert body["item_count"] == 1
        assert body["total_amount"] == "9.99"
        assert body["is_empty"] is False

    def test_カートにない商品は404(self, cart_store) -> None:
        response = remove_from_cart(_event(path={"menu_item_id": "1"}), None)
        assert response["statusCode"] == 404

    def test_パスパラメータがないと400(self, cart_store) -> None:
        assert remove_from_cart(_event(path=None), None)["statusCode"] == 400


class TestClearCartHandler:
    """DELETE /cart のテスト."""

    def test_カートを空にできる(self, cart_store) -> None:
        _add("1")
        response = clear_cart(_event(), None)
        assert response["statusCode"] == 200
        assert json.loads(response["body"])["is_empty"] is True
        assert cart_store.load(SessionId(SESSION_ID)).is_empty()


class TestGetCartHandler:
    """GET /cart 系のテスト."""

    def test_カートの内容を取得できる(self, cart_store) -> None:
        _add("1", quantity=2)

        response = get_cart(_event(), None)

        assert response["statusCode"] == 200
        body = json.loads(response["body"])
        assert body["merchant_name"] == "Pizzería Napoli"
        assert body["total_amount"] == "17.98"
        assert body["items"][0]["unit_price"] == "8.99"
        assert body["items"][0]["line_subtotal"] == "17.98"

    def test_アクセント付きの店舗名はエスケープされない(self, cart_store) -> None:
        _add("1")
        response = get_cart(_event(), None)
        assert "Pizzería" in response["body"]

    def test_空のカートを取得できる(self, cart_store) -> None:
        body = json.loads(get_cart(_event(), None)["body"])
        assert body["is_empty"] is True
        assert body["items"] == []
        assert body["merchant_id"] is None
        assert body["total_amount"] == "0.00"

    def test_カート概要を取得できる(self, cart_store) -> None:
        _add("1", quantity=2)
        body = json.loads(get_cart_summary(_event(), None)["body"])
        assert body == {
            "has_items": True,
            "merchant_id": "1",
            "merchant_name": "Pizzería Napoli",
            "item_count": 2,
        }

    def test_商品のカート内数量を取得できる(self, cart_store) -> None:
        _add("1", quantity=2)
        body = json.loads(get_item_quantity(_event(path={"menu_item_id": "1"}), None)["body"])
        assert body == {"menu_item_id": "1", "quantity": 2}

    def test_カートにない商品の数量は0(self, cart_store) -> None:
        body = json.loads(get_item_quantity(_event(path={"menu_item_id": "2"}), None)["body"])
        assert body["quantity"] == 0
