from __future__ import annotations

import logging
from typing import Callable, Optional

from .drinker import Drinker
from .interfaces import DrinkerProtocol, InventoryProtocol, LyricsProtocol
from .lyrics import Lyrics

logger = logging.getLogger(__name__)


class Lyricist:
    """Writes the two lines of a verse for a wall of bottles.

    The first line describes the wall as it is. The second line performs the
    action chosen by the drinker, then describes the wall again, so its
    trailing half reflects the count *after* the mutation.
    """

    def __init__(
        self,
        drinker: Optional[DrinkerProtocol] = None,
        lyrics_factory: Callable[[], LyricsProtocol] = Lyrics,
    ) -> None:
        self._drinker = drinker or Drinker()
        self._lyrics_factory = lyrics_factory

    def verse(
        self, wall: InventoryProtocol, lyrics: Optional[LyricsProtocol] = None
    ) -> LyricsProtocol:
        if lyrics is None:
            lyrics = self._lyrics_factory()
        lyrics.write(f"{self.describe_wall(wall)}, {self.describe_contents(wall)}.")
        lyrics.write(f"{self.describe_and_take_action(wall)}, {self.describe_wall(wall)}.")
        return lyrics

    def describe_wall(self, wall: InventoryProtocol) -> str:
        return f"{self.describe_contents(wall)} on the wall"

    def describe_contents(self, wall: InventoryProtocol) -> str:
        return wall.describe_contents()

    def describe_and_take_action(self, wall: InventoryProtocol) -> str:
        action = self._drinker.examine(wall)
        action.perform()
        description = action.description()
        logger.debug("Action %s -> %r", type(action).__name__, description)
        return description
