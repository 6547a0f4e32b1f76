"""カートストアインターフェース."""
from abc import ABC, abstractmethod

from ..entities import Cart
from ..identifiers import SessionId


class CartStoreUnavailableError(Exception):
    """カートの保存先に到達できないエラー（一時的な障害）."""

    pass


class CartStore(ABC):
    """セッションIDをキーにカートを1つ保持するストアのインターフェース.

    save は常にカート全体のスナップショットを書き込み、
    途中まで書き込まれたカートが読み出されることはない。
    """

    @abstractmethod
    def load(self, session_id: SessionId) -> Cart:
        """カートを読み込む（存在しない場合は空のカートを返す）."""
        pass

    @abstractmethod
    def save(self, session_id: SessionId, cart: Cart) -> None:
        """カートを保存する."""
        pass

    @abstractmethod
    def clear(self, session_id: SessionId) -> None:
        """カートを破棄する（存在しない場合は何もしない）."""
        pass
