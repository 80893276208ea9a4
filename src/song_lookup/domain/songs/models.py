"""
Song domain models.

Contains the SongRecord value type and the parsing of one comma-delimited
data line into a record.
"""

from dataclasses import dataclass
from typing import Callable, Tuple

from .exceptions import FormatError

DEFAULT_TITLE = "Unknown Title"
DEFAULT_ARTIST = "Unknown Artist"
DEFAULT_RELEASE_DATE = "0"

# Column order of a data line
CSV_FIELDS: Tuple[str, ...] = (
    "valence",
    "year",
    "acousticness",
    "artists",
    "danceability",
    "duration_ms",
    "energy",
    "explicit",
    "id",
    "instrumentalness",
    "key",
    "liveness",
    "loudness",
    "mode",
    "name",
    "popularity",
    "release_date",
    "speechiness",
    "tempo",
)

FIELD_COUNT = len(CSV_FIELDS)

FLOAT_FIELDS = frozenset(
    {
        "valence",
        "acousticness",
        "danceability",
        "energy",
        "instrumentalness",
        "liveness",
        "loudness",
        "speechiness",
        "tempo",
    }
)
INT_FIELDS = frozenset(
    {"year", "duration_ms", "explicit", "key", "mode", "popularity"}
)

_ARTIST_STRIP = str.maketrans("", "", "[]'")


@dataclass(frozen=True)
class SongRecord:
    """One song's attributes.

    Instances are immutable; use dataclasses.replace() to derive a modified
    copy. Equality and hashing cover all 19 fields.
    """

    id: str
    name: str
    artists: Tuple[str, ...]
    year: int
    release_date: str
    duration_ms: int
    explicit: int  # 1 if explicit, else 0
    key: int  # Pitch class 0-11 (not validated)
    mode: int  # 1 major, 0 minor
    popularity: int
    valence: float
    acousticness: float
    danceability: float
    energy: float
    instrumentalness: float
    liveness: float
    loudness: float  # dB, usually negative
    speechiness: float
    tempo: float  # BPM

    @classmethod
    def default(cls) -> "SongRecord":
        """Return the placeholder record used when no data is available."""
        return default_record()

    @classmethod
    def from_line(cls, line: str) -> "SongRecord":
        """Parse one comma-delimited data line.

        Args:
            line: Raw data line (a trailing newline is ignored)

        Returns:
            Parsed SongRecord

        Raises:
            FormatError: If the line does not have exactly 19 fields, or a
                numeric field cannot be parsed
        """
        parts = line.rstrip("\r\n").split(",")
        if len(parts) != FIELD_COUNT:
            raise FormatError(
                f"expected {FIELD_COUNT} fields, got {len(parts)}", line=line
            )

        values = {}
        for name, raw in zip(CSV_FIELDS, parts):
            if name in FLOAT_FIELDS:
                values[name] = _parse_number(float, name, raw, line)
            elif name in INT_FIELDS:
                values[name] = _parse_number(int, name, raw, line)
            elif name == "artists":
                values[name] = parse_artists(raw)
            else:
                values[name] = raw

        return cls(**values)

    def to_line(self) -> str:
        """Render the record as a data line in CSV_FIELDS order."""
        return ",".join(_format_value(name, getattr(self, name)) for name in CSV_FIELDS)


def default_record() -> SongRecord:
    """Create a record with all numeric fields zeroed and placeholder text."""
    return SongRecord(
        id="",
        name=DEFAULT_TITLE,
        artists=(DEFAULT_ARTIST,),
        year=0,
        release_date=DEFAULT_RELEASE_DATE,
        duration_ms=0,
        explicit=0,
        key=0,
        mode=0,
        popularity=0,
        valence=0.0,
        acousticness=0.0,
        danceability=0.0,
        energy=0.0,
        instrumentalness=0.0,
        liveness=0.0,
        loudness=0.0,
        speechiness=0.0,
        tempo=0.0,
    )


def parse_artists(raw: str) -> Tuple[str, ...]:
    """
    Parse the artists column into a tuple of names.

    Brackets and single quotes are removed, then the remainder is split on
    semicolons.

    Example:
        "['Drake';'21 Savage']" -> ("Drake", "21 Savage")
    """
    return tuple(part.strip() for part in raw.translate(_ARTIST_STRIP).split(";"))


def _parse_number(convert: Callable, name: str, raw: str, line: str):
    # int() and float() also accept digit separators and padding
    if "_" in raw or raw != raw.strip():
        raise FormatError(
            f"invalid {convert.__name__} for '{name}': {raw!r}", line=line
        )
    try:
        return convert(raw)
    except ValueError as e:
        raise FormatError(
            f"invalid {convert.__name__} for '{name}': {raw!r}", line=line
        ) from e


def _format_value(name: str, value) -> str:
    if name == "artists":
        return "[" + ";".join(value) + "]"
    return str(value)
