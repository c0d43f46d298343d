from __future__ import annotations

from .actions import Action, Drink, Replenish
from .interfaces import InventoryProtocol


class Drinker:
    """Looks at the wall and decides what happens next."""

    def examine(self, wall: InventoryProtocol) -> Action:
        if wall.is_empty():
            return Replenish(wall)
        return Drink(wall)
