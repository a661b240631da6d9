"""A 2D zombie arcade game and a polygon editor."""

__version__ = "0.1.0"