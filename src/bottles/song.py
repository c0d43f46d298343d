from __future__ import annotations

import logging
from typing import Callable, Optional

from .interfaces import InventoryProtocol, LyricistProtocol
from .lyricist import Lyricist
from .wall import Wall

logger = logging.getLogger(__name__)

DEFAULT_START = 99
DEFAULT_END = 0


class Bottles:
    """Song orchestrator.

    Builds a fresh wall for every count, hands it to the lyricist and joins
    the published verses with a blank line between consecutive verses.

    Collaborators are injected so tests can swap in fakes:

    - ``lyricist``: anything with ``verse(wall) -> lyrics``
    - ``wall_class``: a callable taking the starting count
    """

    def __init__(
        self,
        lyricist: Optional[LyricistProtocol] = None,
        wall_class: Callable[[int], InventoryProtocol] = Wall,
    ) -> None:
        self._lyricist = lyricist or Lyricist()
        self._wall_class = wall_class

    def song(self) -> str:
        return self.verses(DEFAULT_START, DEFAULT_END)

    def verses(self, starting_quantity: int, ending_quantity: int) -> str:
        """Return the verses from ``starting_quantity`` down to ``ending_quantity``.

        Both ends are inclusive. Raises ValueError if the range counts upwards.
        """
        if starting_quantity < ending_quantity:
            raise ValueError(
                f"verses count down: start ({starting_quantity}) must be >= end ({ending_quantity})"
            )
        text = "\n".join(
            self.verse(n) for n in range(starting_quantity, ending_quantity - 1, -1)
        )
        logger.info(
            "Generated %d verse(s) from %d down to %d",
            starting_quantity - ending_quantity + 1,
            starting_quantity,
            ending_quantity,
        )
        return text

    def verse(self, number_of_bottles: int) -> str:
        wall = self._wall_class(number_of_bottles)
        lyrics = self._lyricist.verse(wall)
        logger.debug("Wrote verse for %d bottle(s)", number_of_bottles)
        return lyrics.publish()
