"""Cursor buffer, vi editing, undo history, completion values, styled text, menus and process spawning for an interactive shell."""

__version__ = "0.1.0"