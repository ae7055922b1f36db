import random
from collections import Counter

import pytest

from wumpus.cave import (
    ARROW_COUNT,
    BAT_COUNT,
    BOMB_COUNT,
    BOW_COUNT,
    COLS,
    GAS_COUNT,
    PIT_COUNT,
    ROPE_COUNT,
    ROWS,
    Cave,
)
from wumpus.cell import CellType
from wumpus.items import Arrow, Bomb, Bow, Rope


def make_cave(seed=0):
    return Cave(random.Random(seed))


def all_cells(cave):
    return [cell for row in cave.grid for cell in row]


def clear(cave):
    for cell in all_cells(cave):
        cell.type = CellType.ROOM
        cell.item = None
        cell.has_player = False
        cell.has_wumpus = False


def test_dimensions():
    cave = make_cave()
    assert len(cave.grid) == ROWS
    assert all(len(row) == COLS for row in cave.grid)


def test_cell_bounds():
    cave = make_cave()
    assert cave.cell(0, 0) is cave.grid[0][0]
    assert cave.cell(ROWS - 1, COLS - 1) is cave.grid[ROWS - 1][COLS - 1]
    assert cave.cell(ROWS, 0) is None
    assert cave.cell(0, COLS) is None
    assert cave.cell(-1, 0) is None


def test_neighbours_linked():
    cave = make_cave()
    middle = cave.cell(2, 3)
    assert middle.north is cave.cell(1, 3)
    assert middle.south is cave.cell(3, 3)
    assert middle.west is cave.cell(2, 2)
    assert middle.east is cave.cell(2, 4)
    corner = cave.cell(0, 0)
    assert corner.north is None
    assert corner.west is None
    far = cave.cell(ROWS - 1, COLS - 1)
    assert far.south is None
    assert far.east is None


@pytest.mark.parametrize("seed", range(5))
def test_hazard_and_exit_counts(seed):
    cave = make_cave(seed)
    counts = Counter(cell.type for cell in all_cells(cave))
    assert counts[CellType.PIT] == PIT_COUNT
    assert counts[CellType.BAT] == BAT_COUNT
    assert counts[CellType.GAS] == GAS_COUNT
    assert counts[CellType.EXIT] == 1
    assert counts[CellType.ROOM] == ROWS * COLS - PIT_COUNT - BAT_COUNT - GAS_COUNT - 1


@pytest.mark.parametrize("seed", range(5))
def test_items_placed(seed):
    cave = make_cave(seed)
    placed = [cell.item for cell in all_cells(cave) if cell.item is not None]
    assert len(placed) == BOW_COUNT + ARROW_COUNT + BOMB_COUNT + ROPE_COUNT
    kinds = Counter(type(item) for item in placed)
    assert kinds[Bow] == BOW_COUNT
    assert kinds[Arrow] == ARROW_COUNT
    assert kinds[Bomb] == BOMB_COUNT
    assert kinds[Rope] == ROPE_COUNT
    for cell in all_cells(cave):
        if cell.item is not None:
            assert cell.type in (CellType.ROOM, CellType.EXIT)


def test_traversable_open_grid():
    cave = make_cave()
    clear(cave)
    assert cave.is_traversable() is True


def test_traversable_split_by_wall():
    cave = make_cave()
    clear(cave)
    for row in cave.grid:
        row[4].type = CellType.PIT
    assert cave.is_traversable() is False


def test_traversable_gas_counts_as_walkable():
    cave = make_cave()
    clear(cave)
    for row in cave.grid:
        row[4].type = CellType.GAS
    assert cave.is_traversable() is True


def test_traversable_no_walkable_cells():
    cave = make_cave()
    clear(cave)
    for cell in all_cells(cave):
        cell.type = CellType.BAT
    assert cave.is_traversable() is False


@pytest.mark.parametrize("seed", range(5))
def test_spawn_player(seed):
    cave = make_cave(seed)
    cell = cave.spawn_player()
    assert cell.has_player
    assert cell.type is CellType.ROOM
    assert cell.item is None
    assert sum(c.has_player for c in all_cells(cave)) == 1


@pytest.mark.parametrize("seed", range(5))
def test_spawn_wumpus(seed):
    cave = make_cave(seed)
    player_cell = cave.spawn_player()
    wumpus_cell = cave.spawn_wumpus()
    assert wumpus_cell is not player_cell
    assert wumpus_cell.has_wumpus
    assert wumpus_cell.type not in (CellType.PIT, CellType.BAT, CellType.EXIT)
    assert sum(c.has_wumpus for c in all_cells(cave)) == 1


def test_render_layout():
    cave = make_cave()
    lines = cave.render().splitlines()
    assert len(lines) == ROWS + 3
    assert lines[0] == "    " + "".join(f"{c} " for c in range(COLS))
    border = "  +-" + "--" * COLS + "+"
    assert lines[1] == border
    assert lines[-1] == border
    for r, line in enumerate(lines[2:-1]):
        assert line.startswith(f"{r} | ")
        assert line.endswith("|")


def test_render_symbols():
    cave = make_cave()
    clear(cave)
    row = cave.grid[0]
    row[0].type = CellType.PIT
    row[1].type = CellType.BAT
    row[2].type = CellType.GAS
    row[3].type = CellType.EXIT
    row[4].type = CellType.OPEN_EXIT
    row[5].item = Bow()
    row[6].item = Arrow()
    row[7].has_player = True
    row[8].has_wumpus = True
    row[9].item = Rope()
    line = cave.render().splitlines()[2]
    assert line == "0 | @ ! G E O ) > + # ? |"


def test_render_wumpus_over_item():
    cave = make_cave()
    clear(cave)
    cave.grid[1][0].item = Bomb()
    cave.grid[1][0].has_wumpus = True
    cave.grid[1][1].item = Bomb()
    line = cave.render().splitlines()[3]
    assert line.startswith("1 | # D . ")


def test_print_grid_matches_render(capsys):
    cave = make_cave()
    cave.print_grid()
    assert capsys.readouterr().out == cave.render()


def test_same_seed_same_cave():
    first = [cell.type for cell in all_cells(make_cave(42))]
    second = [cell.type for cell in all_cells(make_cave(42))]
    assert first == second
    counts = Counter(first)
    assert counts[CellType.PIT] == PIT_COUNT
    assert counts[CellType.BAT] == BAT_COUNT
    body = "".join(make_cave(42).render().splitlines()[2:-1])
    assert body.count("@") == PIT_COUNT
    assert body.count("!") == BAT_COUNT
    assert body.count("G") == GAS_COUNT