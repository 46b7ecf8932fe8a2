"""Window-free core of a two-player cooperative room puzzle game: layout, UI, widgets, geometry and messages."""

__version__ = "0.1.0"