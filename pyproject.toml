[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "concent-game"
version = "0.1.0"
description = "A small side-scrolling terminal action game with a stick-figure hero and monsters."
requires-python = ">=3.10"
keywords = ["game", "terminal", "side-scroller", "ascii", "arcade"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]
dependencies = [
    "blessed",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
concent-game = "concent_game.game:main"

[tool.hatch.build.targets.wheel]
packages = ["concent_game"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
