"""Display helpers for song records."""

from typing import Iterable

from rich.table import Table

from .models import SongRecord


def get_display_name(song: SongRecord) -> str:
    """Get a display-friendly name for the song."""
    artists = ", ".join(a for a in song.artists if a)
    if artists and song.name:
        return f"{artists} - {song.name}"
    elif song.name:
        return song.name
    elif song.id:
        return song.id
    else:
        return "<Unknown Song>"


def format_duration_ms(duration_ms: int) -> str:
    """Format a duration in milliseconds as M:SS (or H:MM:SS)."""
    if duration_ms <= 0:
        return "0:00"

    total_seconds = duration_ms // 1000
    hours = total_seconds // 3600
    minutes = (total_seconds % 3600) // 60
    secs = total_seconds % 60

    if hours > 0:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    else:
        return f"{minutes}:{secs:02d}"


def format_record(song: SongRecord) -> str:
    """
    Format a song as a multi-line block of labelled fields.

    Args:
        song: Record to format

    Returns:
        One "Label: value" line per field, in a fixed order
    """
    rows = [
        ("ID", song.id),
        ("Title", song.name),
        ("Artists", ", ".join(song.artists)),
        ("Year", song.year),
        ("Release Date", song.release_date),
        (
            "Duration",
            f"{format_duration_ms(song.duration_ms)} ({song.duration_ms} ms)",
        ),
        ("Explicit", "yes" if song.explicit else "no"),
        ("Key", song.key),
        ("Mode", "major" if song.mode == 1 else "minor"),
        ("Popularity", song.popularity),
        ("Tempo", f"{song.tempo} BPM"),
        ("Loudness", f"{song.loudness} dB"),
        ("Valence", song.valence),
        ("Acousticness", song.acousticness),
        ("Danceability", song.danceability),
        ("Energy", song.energy),
        ("Instrumentalness", song.instrumentalness),
        ("Liveness", song.liveness),
        ("Speechiness", song.speechiness),
    ]
    width = max(len(label) for label, _ in rows)
    return "\n".join(f"{label + ':':<{width + 1}} {value}" for label, value in rows)


def build_songs_table(songs: Iterable[SongRecord], title: str = "Songs") -> Table:
    """Build a Rich table with one summary row per song."""
    table = Table(title=title)
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Title", style="bold")
    table.add_column("Artists")
    table.add_column("Year", justify="right")
    table.add_column("Duration", justify="right")
    table.add_column("Popularity", justify="right")

    for song in songs:
        table.add_row(
            song.id,
            song.name,
            ", ".join(song.artists),
            str(song.year),
            format_duration_ms(song.duration_ms),
            str(song.popularity),
        )

    return table
