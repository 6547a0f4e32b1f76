"""TechFood 注文システムのカート・チェックアウト中核パッケージ."""
from . import domain

__all__ = ["domain"]
