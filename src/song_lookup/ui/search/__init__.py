"""Textual search form for looking up songs by ID."""

from .app import SongSearchApp, describe_lookup

__all__ = ["SongSearchApp", "describe_lookup"]
