"""Minecraft Commands Explorer: find game commands by fuzzy search and filters."""

__version__ = "0.1.0"
