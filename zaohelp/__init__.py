"""Sort Matroska video libraries by chapter presence and export chapter listings."""

__version__ = "0.1.0"