"""Phoneme inventories: the per-language selection from the catalog."""

from conlang.inventory.models import Inventory, InventoryParseError

__all__ = [
    "Inventory",
    "InventoryParseError",
]
