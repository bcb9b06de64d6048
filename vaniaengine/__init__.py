"""A small component-based 2D engine for side-scrolling games on pygame:
game objects and components, scenes, sprite animation, keyboard input,
TMX tile maps and quadtree-based box collision."""

__version__ = "0.1.0"