"""A terminal text adventure in a cave with pits, bats, gas and a Wumpus."""

__version__ = "0.1.0"