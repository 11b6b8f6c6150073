"""Caffeine Text Editor: a minimal PyQt6 plain-text editor."""

__version__ = "1.0.0"
