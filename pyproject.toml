[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vaniaengine"
version = "0.1.0"
description = "A small component-based 2D engine for side-scrolling games, with scenes, animation, TMX tile maps and quadtree collision."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = [
    "game",
    "engine",
    "2d",
    "side-scroller",
    "platformer",
    "tilemap",
    "tmx",
    "quadtree",
    "entity-component",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
    "Topic :: Software Development :: Libraries :: pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["vaniaengine"]

[tool.hatch.build.targets.sdist]
include = [
    "vaniaengine",
    "tests",
]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
