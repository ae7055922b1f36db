"""Cells of the cave grid and the messages they produce."""

from __future__ import annotations

from enum import Enum, auto
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from wumpus.items import Item


class CellType(Enum):
    """What a cell holds.

    ROOM cells may carry items and the player; EXIT, PIT, BAT and GAS are
    given their meaning by the game logic. OPEN_EXIT is an exit blown open
    by dynamite.
    """

    ROOM = auto()
    EXIT = auto()
    PIT = auto()
    BAT = auto()
    GAS = auto()
    OPEN_EXIT = auto()


class Cell:
    """A single cell: its type, neighbours, item and occupants."""

    def __init__(self, cell_type: CellType = CellType.ROOM) -> None:
        self.type = cell_type
        self.north: Optional[Cell] = None
        self.east: Optional[Cell] = None
        self.south: Optional[Cell] = None
        self.west: Optional[Cell] = None
        self.item: Optional[Item] = None
        self.has_player = False
        self._has_wumpus = False

    def __repr__(self) -> str:
        return (
            f"Cell({self.type.name}, player={self.has_player}, "
            f"wumpus={self._has_wumpus}, item={self.item!r})"
        )

    @property
    def has_wumpus(self) -> bool:
        return self._has_wumpus

    @has_wumpus.setter
    def has_wumpus(self, value: bool) -> None:
        if value and self.has_player:
            raise ValueError("the wumpus and the player can't share a cell")
        self._has_wumpus = bool(value)

    def neighbor(self, direction: str) -> Optional[Cell]:
        """Return the adjacent cell in direction 'N', 'E', 'S' or 'W', or None at an edge."""
        match direction:
            case "N":
                return self.north
            case "E":
                return self.east
            case "S":
                return self.south
            case "W":
                return self.west
        raise ValueError(f"undefined direction {direction!r}")

    def pickup_item(self) -> Optional[Item]:
        """Remove and return the item lying here, if any."""
        item, self.item = self.item, None
        return item

    def proximity_message(self) -> str:
        """What the player senses when standing next to this cell."""
        if self.has_wumpus:
            return "You smell something very rancid\n"
        return {
            CellType.EXIT: "You see a nearby light\n",
            CellType.PIT: "You feel a light breeze\n",
            CellType.BAT: "You hear a squeak in the distance\n",
            CellType.GAS: "You smell something funny\n",
        }.get(self.type, "")

    def current_cell_message(self) -> str:
        """What the player notices when standing in this cell."""
        if self.type is CellType.ROOM:
            if self.item is None:
                return ""
            return f"You pick up a {self.item.name}\n"
        return {
            CellType.EXIT: "There is a bright light up above you\n",
            CellType.BAT: (
                "A gaint bad comes out of nowhere and picks you up. "
                "You then get flown somewhere else\n"
            ),
            CellType.GAS: "You smell something funny\n",
        }.get(self.type, "")

    def death_message(self) -> str:
        """The closing message when the game ends in this cell."""
        if self.has_wumpus:
            return "You get eaten by a big hungry wumpus\n"
        return {
            CellType.PIT: "You fall down an endless pit for eternity\n",
            CellType.GAS: "You ignite a flammable gas and get incinerated\n",
            CellType.EXIT: "You climb the rope to the hole above and escape\nYou Win!!!\n",
            CellType.OPEN_EXIT: "An explosion opend up a way out of the cave\nYou Win!!!\n",
        }.get(self.type, "You died")

    def throw_message(self, name: str) -> str:
        """What is heard when an item called name lands in this cell."""
        if self.has_wumpus:
            return "You hear a growl in the distance\n"
        if self.type is CellType.PIT:
            return "You hear nothing\n"
        if self.type is CellType.BAT:
            return "You hear flapping wings in the distance\n"
        return f"You hear {name} hit the floor and break\n"