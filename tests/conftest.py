"""Shared fixtures for Song Lookup tests."""

from pathlib import Path
from typing import Callable, List

import pytest

from song_lookup.domain.songs import CSV_FIELDS

HEADER = ",".join(CSV_FIELDS)

KNIFE_TALK_LINE = (
    "0.5,2020,0.1,[Drake;21 Savage],0.7,210000,0.8,0,abc123,0.0,5,0.1,"
    "-5.0,1,Knife Talk,50,2021-09-03,0.05,120.0"
)

_BASE_VALUES = {
    "valence": "0.5",
    "year": "2020",
    "acousticness": "0.1",
    "artists": "[Artist1;Artist2]",
    "danceability": "0.7",
    "duration_ms": "210000",
    "energy": "0.8",
    "explicit": "0",
    "id": "song0",
    "instrumentalness": "0.0",
    "key": "5",
    "liveness": "0.1",
    "loudness": "-5.0",
    "mode": "1",
    "name": "Song Name",
    "popularity": "50",
    "release_date": "2020-01-01",
    "speechiness": "0.05",
    "tempo": "120.0",
}


def build_line(**overrides: str) -> str:
    """Build a 19-field data line, overriding columns by name."""
    values = {**_BASE_VALUES, **overrides}
    return ",".join(values[name] for name in CSV_FIELDS)


@pytest.fixture
def make_line() -> Callable[..., str]:
    """Factory for data lines with selected columns overridden."""
    return build_line


@pytest.fixture
def knife_talk_line() -> str:
    """A well-formed data line with two artists."""
    return KNIFE_TALK_LINE


@pytest.fixture
def write_csv(tmp_path: Path) -> Callable[..., Path]:
    """Factory that writes a CSV file (header first by default) and returns its path."""

    def _write(lines: List[str], name: str = "songs.csv", header: bool = True) -> Path:
        path = tmp_path / name
        body = ([HEADER] if header else []) + lines
        path.write_text("".join(line + "\n" for line in body), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def songs_csv(write_csv) -> Path:
    """A CSV file with three songs with distinct IDs."""
    return write_csv(
        [
            KNIFE_TALK_LINE,
            build_line(id="def456", name="Second Song", artists="['Solo Artist']"),
            build_line(id="ghi789", name="Third Song", year="1999"),
        ]
    )


@pytest.fixture
def isolated_dirs(tmp_path: Path, monkeypatch) -> Path:
    """Point XDG config/data dirs at a temp directory and clear env overrides."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    monkeypatch.delenv("SONG_LOOKUP_CSV_PATH", raising=False)
    return tmp_path
