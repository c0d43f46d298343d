from __future__ import annotations

import logging

from .exceptions import ActionNotPerformedError
from .interfaces import InventoryProtocol

logger = logging.getLogger(__name__)


class Action:
    """Base class for something done to a wall of bottles during a verse.

    Subclasses implement ``act`` (the mutation) and ``_describe`` (the phrase
    sung afterwards). ``perform`` guarantees ``act`` runs at most once per
    instance; ``description`` refuses to answer before that.
    """

    def __init__(self, wall: InventoryProtocol) -> None:
        self._wall = wall
        self._performed = False

    @property
    def wall(self) -> InventoryProtocol:
        return self._wall

    @property
    def performed(self) -> bool:
        return self._performed

    def perform(self) -> None:
        if self._performed:
            logger.debug("%s already performed; ignoring", type(self).__name__)
            return
        self.act()
        self._performed = True
        logger.debug("Performed %s", type(self).__name__)

    def act(self) -> None:
        raise NotImplementedError

    def description(self) -> str:
        if not self._performed:
            raise ActionNotPerformedError(
                f"{type(self).__name__} must be performed before it can be described"
            )
        return self._describe()

    def _describe(self) -> str:
        raise NotImplementedError


class Drink(Action):
    """Take one bottle down and pass it around."""

    def __init__(self, wall: InventoryProtocol) -> None:
        super().__init__(wall)
        self._took_last_beer = False

    def act(self) -> None:
        # Must be read before taking; the wall is about to change.
        self._took_last_beer = self._wall.is_last_one()
        self._wall.take(1)

    def _describe(self) -> str:
        noun = "it" if self._took_last_beer else "one"
        return f"take {noun} down and pass it around"


class Replenish(Action):
    """Go to the store and restock the wall."""

    RESTOCK_QUANTITY = 99

    def act(self) -> None:
        self._wall.shelf(self.RESTOCK_QUANTITY)

    def _describe(self) -> str:
        return "go to the store and buy some more"
