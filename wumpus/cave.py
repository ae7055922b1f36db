"""The cave: a fixed-size grid of cells holding hazards, items and the exit."""

from __future__ import annotations

import random
from collections import deque
from collections.abc import Iterator
from typing import Optional

from wumpus.cell import Cell, CellType
from wumpus.items import Arrow, Bomb, Bow, Item, Rope

ROWS = 6
COLS = 10

# Pits kill, gas kills only when ignited, bats carry the player anywhere.
PIT_COUNT = 6
GAS_COUNT = 10
BAT_COUNT = 8

BOW_COUNT = 1
ARROW_COUNT = 3
BOMB_COUNT = 2
ROPE_COUNT = 1

_TYPE_CHARS = {
    CellType.ROOM: ".",
    CellType.PIT: "@",
    CellType.BAT: "!",
    CellType.GAS: "G",
    CellType.EXIT: "E",
    CellType.OPEN_EXIT: "O",
}

_TRAVERSABLE = (CellType.ROOM, CellType.GAS)


def _char_text(character: str) -> str:
    return getattr(character, "value", character)


class Cave:
    """A randomly generated cave whose walkable cells are all connected.

    Hazards are scattered until every ROOM and GAS cell can reach every
    other; then the items and the exit are placed.
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.rows = ROWS
        self.cols = COLS
        self.grid: list[list[Cell]] = [[Cell() for _ in range(COLS)] for _ in range(ROWS)]
        self._link_cells()
        self.items: list[Item] = self._instantiate_items()

        while True:
            self._reset_cells()
            self._add_random_hazards(PIT_COUNT, BAT_COUNT, GAS_COUNT)
            if self.is_traversable():
                break

        self._place_items_randomly()
        self._place_exit()

    def __repr__(self) -> str:
        return f"Cave({self.rows}x{self.cols})"

    def _cells(self) -> Iterator[Cell]:
        for row in self.grid:
            yield from row

    def _random_cell(self) -> Cell:
        row = self._rng.randrange(self.rows)
        col = self._rng.randrange(self.cols)
        return self.grid[row][col]

    def _link_cells(self) -> None:
        for r, row in enumerate(self.grid):
            for c, cell in enumerate(row):
                cell.north = self.grid[r - 1][c] if r > 0 else None
                cell.south = self.grid[r + 1][c] if r < self.rows - 1 else None
                cell.west = row[c - 1] if c > 0 else None
                cell.east = row[c + 1] if c < self.cols - 1 else None

    def _reset_cells(self) -> None:
        for cell in self._cells():
            cell.type = CellType.ROOM
            cell.has_player = False
            cell.has_wumpus = False

    @staticmethod
    def _instantiate_items() -> list[Item]:
        return (
            [Bow() for _ in range(BOW_COUNT)]
            + [Arrow() for _ in range(ARROW_COUNT)]
            + [Bomb() for _ in range(BOMB_COUNT)]
            + [Rope() for _ in range(ROPE_COUNT)]
        )

    def _add_random_hazards(self, pit_count: int, bat_count: int, gas_count: int) -> None:
        if pit_count + bat_count + gas_count > self.rows * self.cols:
            raise ValueError("not enough cells to place all hazards")
        pending = [CellType.PIT] * pit_count + [CellType.BAT] * bat_count + [CellType.GAS] * gas_count
        for hazard in pending:
            while True:
                cell = self._random_cell()
                if cell.type is CellType.ROOM:
                    cell.type = hazard
                    break

    def _place_items_randomly(self) -> None:
        for item in self.items:
            while True:
                cell = self._random_cell()
                if cell.type is CellType.ROOM and cell.item is None:
                    cell.item = item
                    break

    def _place_exit(self) -> None:
        while True:
            cell = self._random_cell()
            if cell.type is CellType.ROOM and not cell.has_player and not cell.has_wumpus:
                cell.type = CellType.EXIT
                return

    def is_traversable(self) -> bool:
        """Whether every ROOM and GAS cell is reachable from every other."""
        walkable = {
            (r, c)
            for r, row in enumerate(self.grid)
            for c, cell in enumerate(row)
            if cell.type in _TRAVERSABLE
        }
        if not walkable:
            return False

        start = min(walkable)
        seen = {start}
        queue = deque([start])
        while queue:
            r, c = queue.popleft()
            for step in ((r - 1, c), (r + 1, c), (r, c - 1), (r, c + 1)):
                if step in walkable and step not in seen:
                    seen.add(step)
                    queue.append(step)
        return len(seen) == len(walkable)

    def spawn_wumpus(self) -> Cell:
        """Put the wumpus on a random cell that is not a pit, bat or exit and is unoccupied."""
        blocked = (CellType.PIT, CellType.BAT, CellType.EXIT)
        while True:
            cell = self._random_cell()
            if cell.type in blocked:
                continue
            if not cell.has_player and not cell.has_wumpus:
                cell.has_wumpus = True
                return cell

    def spawn_player(self) -> Cell:
        """Put the player on a random empty, unoccupied room."""
        while True:
            cell = self._random_cell()
            if (
                cell.type is CellType.ROOM
                and not cell.has_player
                and not cell.has_wumpus
                and cell.item is None
            ):
                cell.has_player = True
                return cell

    def cell(self, row: int, col: int) -> Optional[Cell]:
        """The cell at row, col, or None when out of bounds."""
        if 0 <= row < self.rows and 0 <= col < self.cols:
            return self.grid[row][col]
        return None

    @staticmethod
    def _display_char(cell: Cell) -> str:
        if cell.has_wumpus:
            return "#"
        if cell.has_player:
            return "+"
        if cell.item is not None:
            return _char_text(cell.item.character)
        return _TYPE_CHARS.get(cell.type, "_")

    def render(self) -> str:
        """The whole grid as text, with row and column headers."""
        border = "  +-" + "--" * self.cols + "+\n"
        lines = ["    " + "".join(f"{col} " for col in range(self.cols)) + "\n", border]
        for r, row in enumerate(self.grid):
            body = "".join(f"{self._display_char(cell)} " for cell in row)
            lines.append(f"{r} | {body}|\n")
        lines.append(border)
        return "".join(lines)

    def print_grid(self) -> None:
        """Print the grid to standard output."""
        print(self.render(), end="")