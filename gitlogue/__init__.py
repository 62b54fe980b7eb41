"""Colour themes, syntax highlighting and a wrapping paragraph widget for a Git history screensaver."""

__version__ = "0.3.0"