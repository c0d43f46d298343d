from __future__ import annotations

from typing import List, Tuple


class Lyrics:
    """Line buffer for a single verse.

    Lines are kept in write order with their first character upper-cased.
    ``publish`` renders them as newline-separated text with a trailing newline.
    """

    def __init__(self) -> None:
        self._lines: List[str] = []

    @property
    def lines(self) -> Tuple[str, ...]:
        return tuple(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    def write(self, line: str) -> None:
        self._lines.append(_capitalize(line))

    def publish(self) -> str:
        return "\n".join(self._lines) + "\n"


def _capitalize(line: str) -> str:
    # str.capitalize() would lower-case the rest of the line.
    return line[:1].upper() + line[1:]
