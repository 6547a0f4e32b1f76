"""加盟店識別子の値オブジェクト."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MerchantId:
    """メニューを提供する加盟店（レストラン）の識別子."""

    value: str

    def __post_init__(self) -> None:
        """バリデーション."""
        if not self.value:
            raise ValueError("MerchantId cannot be empty")

    def __str__(self) -> str:
        """文字列表現."""
        return self.value
