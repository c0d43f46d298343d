"""
Bottles package root.

Generates the lyrics of "99 Bottles of Beer" from small, swappable parts:
an inventory (``Wall``), actions taken on it, a decision maker, a lyricist
and a lyrics buffer, driven by the ``Bottles`` song orchestrator.
"""
from importlib.metadata import version, PackageNotFoundError

from .song import Bottles

__all__ = ["Bottles", "__version__"]

try:
    __version__ = version("bottles")
except PackageNotFoundError:  # pragma: no cover - during tests without packaging
    __version__ = "0.0.0"
