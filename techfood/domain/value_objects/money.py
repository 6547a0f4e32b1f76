"""金額を表現する値オブジェクト."""
from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

# 小数点以下2桁の固定小数点
CENT = Decimal("0.01")


@dataclass(frozen=True)
class Money:
    """金額（小数点以下2桁の固定小数点）を表現する値オブジェクト."""

    value: Decimal

    def __post_init__(self) -> None:
        """正規化とバリデーション."""
        if isinstance(self.value, bool):
            raise ValueError("Money value must be a number")
        try:
            # float は 2進誤差を持ち込まないよう文字列経由で変換する
            raw = self.value if isinstance(self.value, Decimal) else Decimal(str(self.value))
        except (InvalidOperation, ValueError) as e:
            raise ValueError(f"Invalid money value: {self.value!r}") from e
        if not raw.is_finite():
            raise ValueError("Money value must be finite")
        normalized = raw.quantize(CENT, rounding=ROUND_HALF_UP)
        if normalized < 0:
            raise ValueError("Money value cannot be negative")
        object.__setattr__(self, "value", normalized)

    @classmethod
    def of(cls, value: Decimal | int | str) -> Money:
        """指定金額でMoneyを生成する."""
        return cls(value)

    @classmethod
    def zero(cls) -> Money:
        """ゼロを生成する."""
        return cls(Decimal("0"))

    def add(self, other: Money) -> Money:
        """金額を加算して新しいMoneyを返す."""
        return Money(self.value + other.value)

    def multiply(self, factor: int) -> Money:
        """金額を乗算して新しいMoneyを返す."""
        if factor < 0:
            raise ValueError("Factor cannot be negative")
        return Money(self.value * factor)

    def is_zero(self) -> bool:
        """ゼロか判定."""
        return self.value == 0

    def to_string(self) -> str:
        """JSON・永続化用の文字列表現（例: "17.98"）."""
        return f"{self.value:.2f}"

    def format(self) -> str:
        """表示用フォーマット（例: "$1,017.98"）."""
        return f"${self.value:,.2f}"

    def __str__(self) -> str:
        """文字列表現."""
        return self.format()
