import random

import pytest

from battleship_grid.board import Board
from battleship_grid.config import EMPTY, HIT, SHIP
from battleship_grid.errors import Collision, InvalidRegion, OutOfBounds, PlacementError
from battleship_grid.ship import Orientation, ShipRegion


def test_new_board_is_empty():
    board = Board.create(4, 6)
    assert board.grid.shape == (4, 6)
    assert (board.grid == EMPTY).all()
    assert board.ships == ()
    assert board.player_name == ""
    assert board.player_number == 0


def test_placement_scenario():
    board = Board(10, 10)

    first = board.place_ship((0, 0), 3, Orientation.HORIZONTAL)
    assert first.start == (0, 0) and first.end == (2, 0)

    with pytest.raises(Collision):
        board.place_ship((1, 0), 2, Orientation.HORIZONTAL)

    third = board.place_ship((0, 1), 3, Orientation.HORIZONTAL)
    assert board.ships == (first, third)
    assert [region.ship_id for region in board.ships] == [0, 1]


def test_placement_marks_only_covered_cells():
    board = Board(5, 5)
    board.place_ship((1, 2), 3, Orientation.VERTICAL)

    occupied = {(row, col) for row in range(5) for col in range(5)
                if board.get_cell(row, col) == SHIP}
    assert occupied == {(2, 1), (3, 1), (4, 1)}
    assert board.is_occupied(3, 1)
    assert board.ship_at(3, 1) is board.ships[0]
    assert board.ship_at(0, 0) is None


def test_out_of_bounds_leaves_board_untouched():
    board = Board(5, 5)
    with pytest.raises(OutOfBounds) as info:
        board.place_ship((4, 4), 2, Orientation.HORIZONTAL)
    assert info.value.point == (5, 4)
    assert board.ship_count == 0
    assert (board.grid == EMPTY).all()


def test_collision_leaves_board_untouched():
    board = Board(10, 10)
    board.place_ship((3, 3), 4, Orientation.VERTICAL)
    before = board.grid.copy()

    with pytest.raises(Collision) as info:
        board.place_ship((0, 5), 5, Orientation.HORIZONTAL)

    assert info.value.other is board.ships[0]
    assert board.ship_count == 1
    assert (board.grid == before).all()


def test_width_is_columns_and_height_is_rows():
    board = Board(3, 8)
    board.place_ship((7, 0), 3, Orientation.VERTICAL)
    with pytest.raises(OutOfBounds):
        board.place_ship((0, 0), 4, Orientation.VERTICAL)


def test_add_region_checks_bounds_and_overlap():
    board = Board(4, 4)
    board.add_region(ShipRegion(7, (0, 0), (0, 2)))
    assert board.get_cell(2, 0) == SHIP

    with pytest.raises(OutOfBounds):
        board.add_region(ShipRegion(8, (3, 3), (4, 3)))
    with pytest.raises(Collision):
        board.add_region(ShipRegion(9, (0, 1), (2, 1)))


def test_can_place():
    board = Board(10, 10)
    board.place_ship((0, 0), 3, "H")
    assert not board.can_place((2, 0), 2, "V")
    assert not board.can_place((9, 9), 2, "H")
    assert board.can_place((0, 1), 3, "H")
    assert board.ship_count == 1


def test_cell_access_out_of_range():
    board = Board(3, 3)
    board.set_cell(2, 2, HIT)
    assert board.get_cell(2, 2) == HIT
    for row, col in [(3, 0), (0, 3), (-1, 0), (0, -1)]:
        with pytest.raises(IndexError):
            board.get_cell(row, col)
        with pytest.raises(IndexError):
            board.set_cell(row, col, HIT)


def test_random_placement_fills_fleet_without_overlap():
    board = Board(10, 10)
    placed = board.place_ships_randomly(rng=random.Random(7))

    assert sorted(region.length for region in placed) == [2, 3, 3, 4, 5]
    for i, a in enumerate(placed):
        for b in placed[i + 1:]:
            assert not a.overlaps(b)
    assert int((board.grid == SHIP).sum()) == 17


def test_random_placement_gives_up_when_full():
    board = Board(2, 2)
    with pytest.raises(PlacementError):
        board.place_ships_randomly([2, 2, 2], rng=random.Random(0), max_attempts=50)
    assert board.ship_count == 0
    assert (board.grid == EMPTY).all()


def test_failed_random_placement_keeps_earlier_ships():
    board = Board(3, 3)
    board.place_ship((0, 0), 3, Orientation.HORIZONTAL)
    before = board.grid.copy()
    with pytest.raises(PlacementError):
        board.place_ships_randomly([3, 3, 3], rng=random.Random(1), max_attempts=50)
    assert board.ship_count == 1
    assert (board.grid == before).all()


@pytest.mark.parametrize("region", [
    ShipRegion(0, (0, 0), (2, 2)),
    ShipRegion(0, (2, 0), (0, 0)),
    ShipRegion(0, (0, 3), (0, 1)),
])
def test_add_region_rejects_malformed_regions(region):
    board = Board(4, 4)
    with pytest.raises(InvalidRegion):
        board.add_region(region)
    assert board.ship_count == 0
    assert (board.grid == EMPTY).all()


def test_can_place_with_unknown_orientation():
    board = Board(10, 10)
    assert not board.can_place((0, 0), 2, "Hello")


def test_copy_is_independent():
    board = Board(5, 5)
    board.player_name = "Ada"
    board.player_number = 3
    board.place_ship((0, 0), 2, Orientation.HORIZONTAL)

    snapshot = board.copy()
    snapshot.set_cell(4, 4, HIT)
    snapshot.place_ship((0, 2), 2, Orientation.HORIZONTAL)

    assert board.get_cell(4, 4) == EMPTY
    assert board.ship_count == 1
    assert snapshot.player_name == "Ada" and snapshot.player_number == 3
