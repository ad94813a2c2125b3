"""Hand-rolled data structures, algorithms, small tools and game logic."""

__version__ = "0.1.0"