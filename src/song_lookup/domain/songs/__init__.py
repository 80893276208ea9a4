"""Songs domain - song records and the in-memory song store.

This domain handles:
- SongRecord data model and line parsing
- Loading song data into a keyed store
- Display formatting for records
"""

# Models
from .models import (
    CSV_FIELDS,
    FIELD_COUNT,
    SongRecord,
    default_record,
    parse_artists,
)

# Errors
from .exceptions import FormatError, SongDataError, SourceReadError

# Store
from .store import SongLookup, SongStore

# Display
from .formatting import (
    build_songs_table,
    format_duration_ms,
    format_record,
    get_display_name,
)

__all__ = [
    # Models
    "CSV_FIELDS",
    "FIELD_COUNT",
    "SongRecord",
    "default_record",
    "parse_artists",
    # Errors
    "FormatError",
    "SongDataError",
    "SourceReadError",
    # Store
    "SongLookup",
    "SongStore",
    # Display
    "build_songs_table",
    "format_duration_ms",
    "format_record",
    "get_display_name",
]
