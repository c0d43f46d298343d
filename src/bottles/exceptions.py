class BottlesError(Exception):
    """Base exception for the bottles project."""


class InventoryError(BottlesError, ValueError):
    """Raised when a wall of bottles is asked for something it cannot do."""


class OutOfStockError(InventoryError):
    """Raised when taking from a wall that has no bottles left."""


class InsufficientStockError(InventoryError):
    """Raised when taking more bottles than the wall holds."""


class InvalidQuantityError(InventoryError):
    """Raised for negative quantities (or a negative starting count)."""


class ActionNotPerformedError(BottlesError, RuntimeError):
    """Raised when an action is described before it has been performed."""
