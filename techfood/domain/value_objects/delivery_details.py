"""配達先情報の値オブジェクト."""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

MAX_RECIPIENT_NAME_LENGTH = 100
MAX_PHONE_LENGTH = 15
MAX_ADDRESS_LENGTH = 500
MAX_NOTES_LENGTH = 500

# 数字7〜15桁。先頭の+、空白・ハイフン・括弧の区切りを許容
_PHONE_PATTERN = re.compile(r"^\+?[0-9 ()\-]+$")
_MIN_PHONE_DIGITS = 7
_MAX_PHONE_DIGITS = 15


@dataclass(frozen=True)
class DeliveryDetails:
    """チェックアウト時に顧客が入力する配達先情報.

    生成時には検証せず、get_violations() で違反フィールドを列挙する。
    入力エラーをまとめて利用者に返すため。
    """

    recipient_name: str
    phone: str
    address: str
    notes: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> DeliveryDetails:
        """リクエストボディ等の辞書から生成する（文字列以外は空扱い）."""

        def _text(key: str) -> str:
            value = data.get(key)
            return value.strip() if isinstance(value, str) else ""

        notes = data.get("notes")
        return cls(
            recipient_name=_text("recipient_name"),
            phone=_text("phone"),
            address=_text("address"),
            notes=(notes.strip() or None) if isinstance(notes, str) else None,
        )

    def get_violations(self) -> list[str]:
        """違反しているフィールド名のリストを返す（違反なしは空リスト）."""
        violations = []

        if not self.recipient_name.strip() or len(self.recipient_name) > MAX_RECIPIENT_NAME_LENGTH:
            violations.append("recipient_name")

        if not self._is_valid_phone(self.phone):
            violations.append("phone")

        if not self.address.strip() or len(self.address) > MAX_ADDRESS_LENGTH:
            violations.append("address")

        if self.notes is not None and len(self.notes) > MAX_NOTES_LENGTH:
            violations.append("notes")

        return violations

    def is_valid(self) -> bool:
        """全フィールドが有効か判定."""
        return not self.get_violations()

    @staticmethod
    def _is_valid_phone(phone: str) -> bool:
        phone = phone.strip()
        if not phone or len(phone) > MAX_PHONE_LENGTH:
            return False
        if not _PHONE_PATTERN.match(phone):
            return False
        digits = sum(1 for c in phone if c.isdigit())
        return _MIN_PHONE_DIGITS <= digits <= _MAX_PHONE_DIGITS
