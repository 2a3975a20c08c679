"""A side-scrolling terminal action game: world physics, map rendering and the game loop."""

__version__ = "0.1.0"
__all__ = ["world", "render", "game"]