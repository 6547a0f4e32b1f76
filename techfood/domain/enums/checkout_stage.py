"""チェックアウト処理段階の列挙型."""
from enum import Enum


class CheckoutStage(Enum):
    """1回のチェックアウト試行の処理段階."""

    VALIDATING = "validating"
    BUILDING = "building"
    PERSISTING = "persisting"
    CLEARING = "clearing"
    DONE = "done"
