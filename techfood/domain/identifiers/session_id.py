"""セッション識別子の値オブジェクト."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SessionId:
    """カートを保持する買い物セッションの識別子（不透明な文字列）."""

    value: str

    def __post_init__(self) -> None:
        """バリデーション."""
        if not self.value:
            raise ValueError("SessionId cannot be empty")

    def __str__(self) -> str:
        """文字列表現."""
        return self.value
