"""The game loop: reading commands and reporting what the player senses."""

from __future__ import annotations

import random
import sys
from collections.abc import Sequence
from typing import Optional

from wumpus.cave import Cave
from wumpus.cell import Cell
from wumpus.player import Player
from wumpus.prompt import prompt_user

HELP_TEXT = (
    "========================================\n"
    "HELP GUIDE\n"
    "========================================\n"
    "Goal:\n"
    "Escape the dark cave. Survive.\n"
    "\n"
    "----------------------------------------\n"
    "Hazards:\n"
    "- Wumpus         = Huge, foul, and hungry.\n"
    "- Endless Pit    = Deep... bottomless.\n"
    "- Giant Bat      = Blind, unpredictable\n"
    "- Flammable Gas  = Smells funny. Harmless... right?\n"
    "\n"
    "----------------------------------------\n"
    "Items:\n"
    "- Bow        = Can shoot arrows.\n"
    "- Arrow      = Use with bow.\n"
    "- Dynamite   = Explosive. Very loud.\n"
    "- Rope       = Useful for tying or climbing.\n"
    "\n"
    "Use or throw items wisely to stay alive and uncover secrets.\n"
    "========================================\n"
)

MAP_KEY = (
    "==================== MAP KEY ====================\n"
    "| #  = Wumpus          | )  = Bow               |\n"
    "| !  = Giant Bat       | >  = Arrow             |\n"
    "| G  = Flammable Gas   | ?  = Rope              |\n"
    "| @  = Endless Pit     | D  = Dynamite          |\n"
    "| E  = Exit            | O  = Open Exit         |\n"
    "=================================================\n"
)

ACTION_PROMPT = "Action: N)orth, E)ast, S)outh, W)est, I)nventory, M)ap, H)elp:  "

_MESSAGE_SLOTS = 5


def add_to_random_position(messages: list[str], message: str) -> None:
    """Store message in a randomly chosen empty slot of messages."""
    free = [index for index, text in enumerate(messages) if not text]
    if not free:
        raise ValueError("no empty slot left for the message")
    messages[random.choice(free)] = message


class Game:
    """One round of hunting the wumpus in a freshly generated cave."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.cave = Cave(rng)
        self.player = Player(self.cave.spawn_player(), rng)
        self.game_over = False

    def __repr__(self) -> str:
        return f"Game(game_over={self.game_over}, player={self.player!r})"

    def start(self) -> None:
        """Place the wumpus and run commands until the game ends."""
        self.cave.spawn_wumpus()
        while not self.game_over:
            self.print_cell_data(self.player.current_cell)
            command = prompt_user(ACTION_PROMPT)

            if command == "M":
                self.cave.print_grid()
            elif command == "H":
                print(MAP_KEY + HELP_TEXT, end="")
            elif command == "I":
                self.game_over = self.player.use_item()
            elif command in ("N", "E", "S", "W"):
                try:
                    self.game_over = self.player.move(command)
                except ValueError as exc:
                    print(f"ERROR: {exc}", file=sys.stderr)
            else:
                print(f'INPUT ERROR: Unrecognized token "{command}"')

        print(self.player.current_cell.death_message(), end="", file=sys.stderr)

    def print_cell_data(self, cell: Cell) -> None:
        """Print what the player notices here and senses nearby, in random order."""
        messages = [""] * _MESSAGE_SLOTS
        add_to_random_position(messages, cell.current_cell_message())
        for direction in ("N", "S", "E", "W"):
            neighbor = cell.neighbor(direction)
            if neighbor is not None:
                add_to_random_position(messages, neighbor.proximity_message())
        print("".join(messages), end="")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Play one game on standard input and output."""
    try:
        Game().start()
    except (EOFError, KeyboardInterrupt):
        print()
        return 1
    return 0