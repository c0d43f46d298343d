from __future__ import annotations

from typing import Protocol


class InventoryProtocol(Protocol):
    """Protocol that any wall of bottles must follow.

    The song only ever reads the description and the two state checks, and
    mutates through ``take``/``shelf``. Fakes used in tests implement just
    these methods.
    """

    def describe_contents(self) -> str:
        """Return the human-readable contents, e.g. ``"3 bottles of beer"``."""

    def take(self, quantity: float = 1) -> None:
        """Remove bottles from the wall.

        Should raise an InventoryError subclass when the request is invalid.
        """

    def shelf(self, quantity: float = 1) -> None:
        """Put bottles back on the wall."""

    def is_empty(self) -> bool:
        ...

    def is_last_one(self) -> bool:
        ...


class ActionProtocol(Protocol):
    """A one-shot, describable mutation of an inventory."""

    def perform(self) -> None:
        """Apply the effect. Calling it more than once must not repeat it."""

    def description(self) -> str:
        """Describe what ``perform`` did. Only valid after performing."""


class DrinkerProtocol(Protocol):
    def examine(self, inventory: InventoryProtocol) -> ActionProtocol:
        """Choose the action that applies to the inventory's current state."""


class LyricsProtocol(Protocol):
    def write(self, line: str) -> None:
        ...

    def publish(self) -> str:
        ...


class LyricistProtocol(Protocol):
    def verse(self, inventory: InventoryProtocol) -> LyricsProtocol:
        """Write the two lines of a verse for the inventory."""
