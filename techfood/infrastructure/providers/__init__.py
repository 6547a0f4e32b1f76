"""プロバイダー実装モジュール."""
from .in_memory_menu_catalog import InMemoryMenuCatalog

__all__ = [
    "InMemoryMenuCatalog",
]
