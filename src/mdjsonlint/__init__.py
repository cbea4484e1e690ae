"""Syntax checking for JSON and JSON5 blocks embedded in Markdown documents."""

__version__ = "0.1.0"
