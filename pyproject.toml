[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minesweep"
version = "0.1.0"
description = "Minesweeper game logic and a playable terminal game"
requires-python = ">=3.10"
keywords = ["minesweeper", "game", "terminal", "puzzle"]
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
dependencies = [
    "blessed",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
minesweep = "minesweep.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["minesweep"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
