"""チェックアウトユースケース."""
import logging
from dataclasses import dataclass

from techfood.domain.enums import CheckoutStage, OrderStatus
from techfood.domain.identifiers import CustomerId, OrderId, SessionId
from techfood.domain.ports import CartStore, OrderRepository, OrderRepositoryError
from techfood.domain.services import CartToOrderConverter
from techfood.domain.value_objects import DeliveryDetails, Money

logger = logging.getLogger(__name__)


class CheckoutError(Exception):
    """チェックアウト失敗の基底エラー."""

    stage: CheckoutStage = CheckoutStage.VALIDATING


class EmptyCartError(CheckoutError):
    """カートが空のエラー."""

    stage = CheckoutStage.VALIDATING

    def __init__(self, session_id: SessionId) -> None:
        self.session_id = session_id
        super().__init__("Cart is empty")


class InvalidDeliveryDetailsError(CheckoutError):
    """配達先情報が不正なエラー."""

    stage = CheckoutStage.VALIDATING

    def __init__(self, fields: list[str]) -> None:
        self.fields = fields
        super().__init__(f"Invalid delivery details: {', '.join(fields)}")


class OrderPersistFailureError(CheckoutError):
    """注文の保存に失敗したエラー（カートは変更されていないので再試行できる）."""

    stage = CheckoutStage.PERSISTING


@dataclass(frozen=True)
class CheckoutResult:
    """チェックアウト結果."""

    order_id: OrderId
    status: OrderStatus
    total: Money
    item_count: int
    cart_cleared: bool


class CheckoutUseCase:
    """カートを注文に確定させるユースケース.

    VALIDATING → BUILDING → PERSISTING → CLEARING → DONE の順に進む。
    カートは注文の保存が確認できた後にだけ空にする。
    """

    def __init__(
        self,
        cart_store: CartStore,
        order_repository: OrderRepository,
    ) -> None:
        """初期化.

        Args:
            cart_store: カートストア
            order_repository: 注文リポジトリ
        """
        self._cart_store = cart_store
        self._order_repository = order_repository

    def execute(
        self,
        session_id: SessionId,
        customer_id: CustomerId,
        delivery: DeliveryDetails,
    ) -> CheckoutResult:
        """チェックアウトを実行する.

        Args:
            session_id: セッションID
            customer_id: 注文者の顧客ID
            delivery: 配達先情報

        Returns:
            チェックアウト結果

        Raises:
            EmptyCartError: カートが空の場合
            InvalidDeliveryDetailsError: 配達先情報が不正な場合
            OrderPersistFailureError: 注文の保存に失敗した場合
            CartStoreUnavailableError: カートを読み込めない場合
        """
        # VALIDATING: 以降の処理はこの1回の読み込みだけを使う
        cart = self._cart_store.load(session_id)
        if cart.is_empty():
            raise EmptyCartError(session_id)

        violations = delivery.get_violations()
        if violations:
            raise InvalidDeliveryDetailsError(violations)

        # BUILDING
        order = CartToOrderConverter.convert(cart, customer_id, delivery)

        # PERSISTING
        try:
            self._order_repository.create(order)
        except OrderRepositoryError as e:
            logger.error(f"Failed to persist order {order.order_id} for session {session_id}: {e}")
            raise OrderPersistFailureError(f"Failed to persist order: {e}") from e

        logger.info(
            f"Order {order.order_id} created for customer {customer_id} "
            f"(merchant={order.merchant_id}, total={order.total.to_string()})"
        )

        # CLEARING: 注文は確定済みのため、失敗しても警告に留める
        cart_cleared = True
        try:
            self._cart_store.clear(session_id)
        except Exception as e:
            cart_cleared = False
            logger.warning(
                f"Order {order.order_id} persisted but clearing cart for session {session_id} failed: {e}"
            )

        return CheckoutResult(
            order_id=order.order_id,
            status=order.status,
            total=order.total,
            item_count=order.get_item_count(),
            cart_cleared=cart_cleared,
        )
