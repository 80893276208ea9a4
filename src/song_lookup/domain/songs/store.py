"""
In-memory song store.

Loads comma-delimited song data into a dict keyed by song ID and serves
point lookups and full listings.
"""

import os
from typing import Dict, Iterable, Iterator, List, Optional, Protocol, Tuple, Union

from loguru import logger

from .exceptions import FormatError, SourceReadError
from .models import SongRecord

SongSource = Union[str, "os.PathLike[str]", Iterable[str]]


class SongLookup(Protocol):
    """Contract shared by the console and search front ends."""

    def load(self, source: SongSource, header: bool = True) -> int: ...

    def get(self, song_id: str) -> Optional[SongRecord]: ...

    def all(self) -> List[SongRecord]: ...


class SongStore:
    """Keyed collection of SongRecords.

    Loads are all-or-nothing: records are parsed into a pending dict and only
    merged into the store once the whole source has been read. Duplicate IDs
    overwrite earlier entries, both within a load and across loads.

    Not thread-safe; callers sharing a store must synchronize load() against
    reads themselves.
    """

    def __init__(self) -> None:
        self._songs: Dict[str, SongRecord] = {}

    def __len__(self) -> int:
        return len(self._songs)

    def __contains__(self, song_id: object) -> bool:
        return song_id in self._songs

    def load(self, source: SongSource, header: bool = True) -> int:
        """
        Load songs from a path or an iterable of lines.

        Args:
            source: Path to a UTF-8 CSV file, or an open iterable of lines
                (not closed by the store)
            header: Whether the first line is a header to discard

        Returns:
            Number of data lines parsed (duplicate IDs included)

        Raises:
            FormatError: If any data line is malformed (store unchanged)
            SourceReadError: If the source cannot be opened or read (store unchanged)
        """
        if isinstance(source, (str, os.PathLike)):
            path = os.fspath(source)
            try:
                with open(path, "r", encoding="utf-8-sig", newline="") as f:
                    pending, count = self._parse_lines(f, header)
            except (OSError, UnicodeDecodeError) as e:
                logger.warning(f"Failed to read song data from {path}: {e}")
                raise SourceReadError(path, str(e)) from e
        else:
            path = getattr(source, "name", "<stream>")
            try:
                pending, count = self._parse_lines(source, header)
            except (OSError, UnicodeDecodeError) as e:
                raise SourceReadError(str(path), str(e)) from e

        self._songs.update(pending)
        logger.info(
            f"Loaded {count} songs from {path} ({len(self._songs)} in store)"
        )
        return count

    def get(self, song_id: str) -> Optional[SongRecord]:
        """Return the record for song_id, or None if absent."""
        return self._songs.get(song_id)

    def all(self) -> List[SongRecord]:
        """Return every stored record in insertion order."""
        return list(self._songs.values())

    def ids(self) -> List[str]:
        """Return every stored song ID in insertion order."""
        return list(self._songs)

    def _parse_lines(
        self, lines: Iterable[str], header: bool
    ) -> Tuple[Dict[str, SongRecord], int]:
        pending: Dict[str, SongRecord] = {}
        count = 0
        line_iter: Iterator[str] = iter(lines)

        if header:
            next(line_iter, None)

        first_line = 2 if header else 1
        for line_number, line in enumerate(line_iter, start=first_line):
            try:
                song = SongRecord.from_line(line)
            except FormatError as e:
                logger.debug(f"Rejecting line {line_number}: {e}")
                raise FormatError(str(e), line_number=line_number, line=line) from e

            if song.id in pending:
                logger.debug(f"Duplicate song ID {song.id!r} on line {line_number}")
            pending[song.id] = song
            count += 1

        return pending, count
