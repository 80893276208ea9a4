"""UI layer for Song Lookup.

Contains:
- search: Textual form for looking up a song by ID
"""

__all__ = []
