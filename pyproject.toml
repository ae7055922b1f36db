[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wumpus"
version = "0.1.0"
description = "A terminal text adventure: escape a dark cave full of pits, bats, gas and a hungry Wumpus."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "wumpus", "text adventure", "terminal", "cave"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
wumpus = "wumpus.game:main"

[tool.hatch.build.targets.wheel]
packages = ["wumpus"]

[tool.pytest.ini_options]
addopts = "-ra"
