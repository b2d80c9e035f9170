"""TUI Tetris: config file parsing and 7-bag piece sequencing."""

__version__ = "0.1.0"
