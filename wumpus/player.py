"""The player: position in the cave, inventory and movement."""

from __future__ import annotations

import random
from typing import Optional

from wumpus.cell import Cell, CellType
from wumpus.items import Item, ItemCharacter
from wumpus.prompt import prompt_user

_MAGNITUDE = (1, 8)
_DIRECTIONS = "NESW"


def _char_text(character: str) -> str:
    """The plain text of an item character, whether an enum member or a str."""
    return getattr(character, "value", character)


class Player:
    """The adventurer walking the cave.

    The starting cell must already be marked as holding the player (as the
    cave's spawn does) and must be an ordinary room.
    """

    def __init__(self, starting_cell: Cell, rng: Optional[random.Random] = None) -> None:
        if not starting_cell.has_player:
            raise ValueError("starting cell must be assigned to the player by the cave first")
        if starting_cell.type is not CellType.ROOM:
            raise ValueError("starting cell must be a ROOM")
        self.current_cell = starting_cell
        self.inventory: dict[Item, int] = {}
        self.using_rope = False
        self._rng = rng if rng is not None else random.Random()

    def __repr__(self) -> str:
        return f"Player(at={self.current_cell!r}, using_rope={self.using_rope})"

    def move(self, direction: str) -> bool:
        """Step into the adjacent cell in direction; return True if the game ends.

        Raises ValueError for an unknown direction or when no cell lies that way.
        """
        if direction not in _DIRECTIONS or len(direction) != 1:
            raise ValueError(f"undefined direction {direction!r}")
        to_cell = self.current_cell.neighbor(direction)
        if to_cell is None:
            raise ValueError("there's no cell in the specified direction")

        previous_cell = self.current_cell
        previous_cell.has_player = False
        to_cell.has_player = True
        self.current_cell = to_cell

        if to_cell.type is CellType.OPEN_EXIT:
            return True

        self.pickup(to_cell.pickup_item())
        return self.is_in_hazard(self.current_cell, previous_cell)

    def quick_move(self, direction: str) -> bool:
        """Shift position one cell without touching occupancy; False at an edge."""
        new_cell = self.current_cell.neighbor(direction)
        if new_cell is None:
            return False
        self.current_cell = new_cell
        return True

    def pickup(self, item: Optional[Item]) -> None:
        """Put item into the inventory, taking it out of the current cell."""
        if item is None:
            return
        self.current_cell.item = None
        print(f"You picked up {item.name}")
        self.inventory[item] = self.inventory.get(item, 0) + 1

    def destroy_item(self, character: str) -> None:
        """Lose one item shown by character from the inventory."""
        for item in list(self.inventory):
            if item.character != character:
                continue
            self.inventory[item] -= 1
            print(f"{item.name} was lost")
            if self.inventory[item] == 0:
                del self.inventory[item]
                return

    def _pull_back(self, previous_cell: Cell) -> None:
        self.using_rope = False
        self.current_cell.has_player = False
        self.current_cell = previous_cell
        previous_cell.has_player = True
        self.destroy_item(ItemCharacter.ROPE)

    def is_in_hazard(self, cell: Cell, previous_cell: Cell) -> bool:
        """Resolve what cell does to the player; return True if the game ends."""
        while True:
            if not cell.has_player:
                return False
            if cell.has_wumpus:
                return True

            if cell.type is CellType.PIT:
                if self.using_rope:
                    print("There was a endless pit\nbut you get away by climbing your rope")
                    self._pull_back(previous_cell)
                    return False
                return True

            if cell.type is CellType.BAT:
                if self.using_rope:
                    print(
                        "There was a giant bat that tried to take you\n"
                        "but you get away being tied to a rope"
                    )
                    self._pull_back(previous_cell)
                    return False
                print("A giant bat picks you up and moves you somewhere else")
                self.random_move()
                self.current_cell.has_player = True
                cell = self.current_cell
                continue

            if cell.type is CellType.GAS:
                return False

            if self.using_rope:
                self.destroy_item(ItemCharacter.ROPE)
                print("As you enter the room your rope gets cut by a rock")
            return False

    def random_move(self) -> None:
        """Carry the player a random distance across and then up or down the cave."""
        self.current_cell.has_player = False
        x_magnitude = self._rng.randint(*_MAGNITUDE)
        y_magnitude = self._rng.randint(*_MAGNITUDE)
        x_direction = self._rng.randint(0, 1)
        y_direction = self._rng.randint(0, 1)

        for _ in range(x_magnitude):
            self.quick_move("E" if x_direction == 0 else "W")
        for _ in range(y_magnitude):
            self.quick_move("N" if y_direction == 0 else "S")

    def inventory_text(self) -> str:
        """The inventory listing shown when choosing an item."""
        lines = ["Your inventory. Type the letter next to the item to use it. Or (C)ancel. \n"]
        lines.extend(
            f"You have {count} {item.name} ('{_char_text(item.character)}')\n"
            for item, count in self.inventory.items()
        )
        return "".join(lines)

    def use_item(self) -> bool:
        """Ask which item to use and use it; return True if the game ends."""
        while True:
            text = prompt_user(self.inventory_text())
            if len(text) == 1:
                if text == "C":
                    return False
                chosen = next(
                    (item for item in self.inventory if item.character == text), None
                )
                if chosen is not None:
                    return chosen.use_item(self.current_cell, self)
            print(f'INPUT ERROR: Unrecognized token "{text}"')

    def has_item(self, character: str) -> bool:
        """Whether the inventory holds an item shown by character."""
        return any(item.character == character for item in self.inventory)