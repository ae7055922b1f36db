# wumpus

A small text adventure for the terminal. You are in a dark cave of 6 rows
by 10 columns. Find the exit and get out alive.

## Installing

```
pip install .
```

## Playing

```
wumpus
```

Each turn the game prints what you notice in your room and what you sense
in the rooms next to it. The order of these lines is random. Then it asks
for one action. Type a single character:

- `N`, `E`, `S`, `W`: move north, east, south or west
- `I`: open your inventory and use an item
- `M`: show the map of the whole cave, hazards and the Wumpus included
- `H`: show the map key and the help guide

Any other input is reported as an unrecognized token. If you try to walk
off the edge of the cave, an error goes to standard error and you stay
where you are. The message that ends the game also goes to standard error.
If input ends or you press Ctrl-C, the command stops with exit status 1.

### Hazards

- **Wumpus**: you smell something very rancid when it is next to you.
  Walking into its room ends the game.
- **Endless pit**: you feel a light breeze near one. Falling in ends the game.
- **Giant bat**: you hear a squeak near one. It carries you a random
  distance across the cave, and it may drop you into another hazard.
- **Flammable gas**: you smell something funny. You can walk through it,
  but lighting dynamite in it ends the game.

### Items

When you walk into a room that holds an item, you pick it up. In the
inventory, type an item's character to use it, or `C` to cancel. Each
item then offers its own choices, each a single character:

- **Bow** `)`: shoot (`s`) an arrow into a neighbouring room, throw it
  (`t`) or cancel (`c`). A shot arrow kills the Wumpus or a bat in that
  room and is left lying there.
- **Arrow** `>`: shot with the bow, or thrown.
- **Dynamite** `D`: ignite and throw (`t`) into a neighbouring room, or
  cancel (`c`). It kills the Wumpus or a bat, destroys any item there, and
  blows an exit open.
- **Rope** `?`: knot yourself (`k`), throw it (`t`) or cancel (`c`). Tied
  on, it pulls you back out of a pit or away from a bat, and is lost in
  doing so. It is also cut and lost when you walk into an ordinary room.

A thrown item is lost, and you hear where it landed. After choosing to
throw or shoot you are asked for a direction (`N`, `E`, `S`, `W`), or `c`
to cancel.

You win by knotting the rope while standing on the exit, or by walking
into an exit that dynamite has blown open.

### Map key

| Character | Meaning        | Character | Meaning   |
|-----------|----------------|-----------|-----------|
| `+`       | You            | `)`       | Bow       |
| `#`       | Wumpus         | `>`       | Arrow     |
| `!`       | Giant bat      | `?`       | Rope      |
| `G`       | Flammable gas  | `D`       | Dynamite  |
| `@`       | Endless pit    | `E`       | Exit      |
| `.`       | Empty room     | `O`       | Open exit |

## Using it from Python

```python
import random

from wumpus.game import Game

Game(random.Random(42)).start()
```

Passing a `random.Random` makes the cave layout and the bats' flights
repeatable; without one a fresh generator is used.

The cave can be built and inspected on its own:

```python
from wumpus.cave import Cave

cave = Cave()
start = cave.spawn_player()
cave.spawn_wumpus()
print(cave.render())
print(cave.cell(0, 0).type, cave.is_traversable())
```

`Cave` scatters 6 pits, 8 bats and 10 gas rooms until every room and gas
cell can reach every other, then places one bow, three arrows, two sticks
of dynamite, one rope and the exit. `Cave.cell(row, col)` returns `None`
outside the grid.

`wumpus.player.Player` takes a starting cell that `Cave.spawn_player`
has given it and raises `ValueError` otherwise. `Player.move` raises
`ValueError` for an unknown direction or when no cell lies that way.

## What it does not do

The cave size and the numbers of hazards and items are fixed; there are
no settings or difficulty levels. A game cannot be saved or resumed, and
there is no score or high-score list.

## Running the tests

```
pip install .[test]
pytest
```