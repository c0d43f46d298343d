import pytest

from bottles.exceptions import (
    InsufficientStockError,
    InvalidQuantityError,
    InventoryError,
    OutOfStockError,
)
from bottles.wall import Wall


@pytest.mark.parametrize("n", range(2, 100))
def test_describe_contents_plural(n):
    assert Wall(n).describe_contents() == f"{n} bottles of beer"


def test_describe_contents_singular_and_empty():
    assert Wall(1).describe_contents() == "1 bottle of beer"
    assert Wall(0).describe_contents() == "no more bottles of beer"


def test_take_decrements_count():
    wall = Wall(3)
    wall.take()
    assert wall.count == 2
    wall.take(2)
    assert wall.count == 0
    assert wall.is_empty()


def test_take_rounds_fractions_up():
    wall = Wall(3)
    wall.take(1.5)
    assert wall.count == 1


def test_take_errors():
    with pytest.raises(OutOfStockError):
        Wall(0).take(1)
    with pytest.raises(InsufficientStockError):
        Wall(3).take(5)
    with pytest.raises(InvalidQuantityError):
        Wall(3).take(-1)


def test_out_of_stock_checked_before_quantity():
    # An empty wall reports it is out of stock even for a bad quantity
    with pytest.raises(OutOfStockError):
        Wall(0).take(-1)


def test_insufficient_stock_message_is_formatted():
    with pytest.raises(InsufficientStockError) as excinfo:
        Wall(3).take(5)
    assert str(excinfo.value) == "not enough beer to take 5 (have 3)"


def test_failed_take_leaves_count_untouched():
    wall = Wall(3)
    with pytest.raises(InventoryError):
        wall.take(5)
    assert wall.count == 3


def test_shelf():
    wall = Wall(0)
    wall.shelf(99)
    assert wall.count == 99
    wall.shelf()
    assert wall.count == 100


def test_shelf_rounds_fractions_down():
    wall = Wall(0)
    wall.shelf(2.7)
    assert wall.count == 2


def test_shelf_negative_quantity():
    wall = Wall(4)
    with pytest.raises(InvalidQuantityError):
        wall.shelf(-1)
    assert wall.count == 4


def test_negative_starting_count_rejected():
    with pytest.raises(InvalidQuantityError):
        Wall(-1)


def test_state_checks():
    assert Wall(0).is_empty() and not Wall(0).is_last_one()
    assert Wall(1).is_last_one() and not Wall(1).is_empty()
    assert not Wall(2).is_empty() and not Wall(2).is_last_one()


def test_inventory_errors_are_value_errors():
    with pytest.raises(ValueError):
        Wall(2).take(3)


def test_count_is_read_only():
    wall = Wall(5)
    with pytest.raises(AttributeError):
        wall.count = 10  # type: ignore[misc]
