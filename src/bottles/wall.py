from __future__ import annotations

import logging
import math

from .exceptions import InsufficientStockError, InvalidQuantityError, OutOfStockError

logger = logging.getLogger(__name__)


class Wall:
    """The bottles of beer on the wall.

    - Holds a single non-negative integer count
    - Only ``take`` and ``shelf`` mutate the count; both validate their input
    - Fractional quantities are rounded against the caller: takes round up,
      shelving rounds down
    """

    def __init__(self, bottles_of_beer: int) -> None:
        if bottles_of_beer < 0:
            raise InvalidQuantityError(f"a wall cannot hold {bottles_of_beer} bottles")
        self._count = int(bottles_of_beer)

    @property
    def count(self) -> int:
        return self._count

    def describe_contents(self) -> str:
        if self._count == 0:
            return "no more bottles of beer"
        if self._count == 1:
            return "1 bottle of beer"
        return f"{self._count} bottles of beer"

    def take(self, quantity: float = 1) -> None:
        if self._count == 0:
            raise OutOfStockError("the wall is out of beer")
        if quantity > self._count:
            raise InsufficientStockError(
                f"not enough beer to take {quantity} (have {self._count})"
            )
        if quantity < 0:
            raise InvalidQuantityError(f"cannot take {quantity} beers")
        old = self._count
        self._count -= math.ceil(quantity)
        logger.debug("Took %s from wall; old=%s new=%s", quantity, old, self._count)

    def shelf(self, quantity: float = 1) -> None:
        if quantity < 0:
            raise InvalidQuantityError(f"cannot shelf {quantity} beers")
        old = self._count
        self._count += math.floor(quantity)
        logger.debug("Shelved %s on wall; old=%s new=%s", quantity, old, self._count)

    def is_empty(self) -> bool:
        return self._count == 0

    def is_last_one(self) -> bool:
        return self._count == 1

    def __repr__(self) -> str:  # pragma: no cover - debugging aid
        return f"Wall({self._count})"
