"""Items the player can pick up, throw, shoot and use."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Optional

from wumpus.cell import Cell, CellType
from wumpus.prompt import read_choice

if TYPE_CHECKING:
    from wumpus.player import Player


class ItemCharacter(str, Enum):
    """The character that shows an item on the map and selects it in the inventory."""

    BOW = ")"
    ARROW = ">"
    ROPE = "?"
    BOMB = "D"


class Item:
    """Something that lies in a cell or in the player's inventory."""

    options = "Throw(t), Cancel(c)"

    def __init__(self, name: str, character: str) -> None:
        self.name = name
        self.character = character

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"

    def _ask(self) -> str:
        print(f"How do you want to use {self.name}. {self.options}")
        return read_choice()

    def _throw_and_report(self, origin_cell: Cell, player: Player) -> None:
        result = self.basic_throw(origin_cell, player)
        if not result:
            self.use_item(origin_cell, player)
        print(result, end="\n\n")

    def use_item(self, origin_cell: Cell, player: Player) -> bool:
        """Offer to throw or cancel; return True if the game ends."""
        while True:
            choice = self._ask()
            if choice == "t":
                self._throw_and_report(origin_cell, player)
                return False
            if choice == "c":
                return False

    def basic_throw(self, origin_cell: Cell, player: Player) -> str:
        """Throw the item into a neighbouring cell; return what is heard, or '' if cancelled."""
        cell = self.prompt_for_direction(origin_cell, "throw")
        if cell is None:
            return ""
        player.destroy_item(self.character)
        return cell.throw_message(self.name)

    def prompt_for_direction(self, origin_cell: Cell, verb: str) -> Optional[Cell]:
        """Ask for a direction until one leads to a cell; None when cancelled."""
        while True:
            print(f"Which direction do you want to {verb} ('N', 'E', 'S', 'W') or Cancel(c)")
            direction = read_choice()
            if direction == "c":
                return None
            cell = origin_cell.neighbor(direction) if direction in "NESW" else None
            if cell is not None:
                return cell
            print("There is nothing that direction")


class Arrow(Item):
    """Ammunition for the bow."""

    def __init__(self) -> None:
        super().__init__("arrow", ItemCharacter.ARROW)


class Bow(Item):
    """Shoots arrows at whatever is in a neighbouring cell."""

    options = "Shoot(s), Throw(t), Cancel(c)"

    def __init__(self) -> None:
        super().__init__("bow", ItemCharacter.BOW)

    def use_item(self, origin_cell: Cell, player: Player) -> bool:
        while True:
            choice = self._ask()
            if choice == "s":
                return self.shoot(origin_cell, player)
            if choice == "t":
                self._throw_and_report(origin_cell, player)
                return False
            if choice == "c":
                return False

    def shoot(self, origin_cell: Cell, player: Player) -> bool:
        """Fire an arrow into a neighbouring cell, killing a wumpus or a bat there."""
        if not player.has_item(ItemCharacter.ARROW):
            print("You have nothing to shoot")
            return self.use_item(origin_cell, player)
        cell = self.prompt_for_direction(origin_cell, "shoot")
        if cell is None:
            return self.use_item(origin_cell, player)

        player.destroy_item(ItemCharacter.ARROW)
        if cell.has_wumpus:
            cell.has_wumpus = False
            print("You hear a yelp in the distance")
            cell.item = Arrow()
        elif cell.type is CellType.BAT:
            cell.type = CellType.ROOM
            print("You hear a squeak and a thud in the distance")
            cell.item = Arrow()
        else:
            print(cell.throw_message("arrow"), end="")
        return False


class Bomb(Item):
    """Dynamite: clears a neighbouring cell and can blow open the exit."""

    options = "Ignite and Throw(t), Cancel(c)"

    def __init__(self) -> None:
        super().__init__("dynamite", ItemCharacter.BOMB)

    def use_item(self, origin_cell: Cell, player: Player) -> bool:
        while True:
            choice = self._ask()
            if choice == "c":
                return False
            if choice != "t":
                continue
            if origin_cell.type is CellType.GAS:
                return True
            cell = self.prompt_for_direction(origin_cell, "throw")
            if cell is None:
                continue

            player.destroy_item(ItemCharacter.BOMB)
            if cell.has_wumpus:
                cell.has_wumpus = False
            elif cell.type is CellType.BAT:
                cell.type = CellType.ROOM
            elif cell.type is CellType.EXIT:
                cell.type = CellType.OPEN_EXIT
            print("You hear an explosion in the distance")
            cell.item = None
            return False


class Rope(Item):
    """Tie it on to escape pits and bats, or climb out at the exit."""

    options = "Knot Yourslef(k), Throw(t), Cancel(c)"

    def __init__(self) -> None:
        super().__init__("rope", ItemCharacter.ROPE)

    def use_item(self, origin_cell: Cell, player: Player) -> bool:
        while True:
            choice = self._ask()
            if choice == "k":
                if origin_cell.type is CellType.EXIT:
                    return True
                player.using_rope = True
                print("You tie the rope around you")
                return False
            if choice == "t":
                self._throw_and_report(origin_cell, player)
                return False
            if choice == "c":
                return False