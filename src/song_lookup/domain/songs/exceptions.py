"""Song data exceptions for error handling."""

from typing import Optional


class SongDataError(Exception):
    """Base exception for song data operations."""

    pass


class FormatError(SongDataError, ValueError):
    """Raised when a data line has the wrong shape or a bad numeric value."""

    def __init__(
        self,
        message: str,
        line_number: Optional[int] = None,
        line: Optional[str] = None,
    ):
        self.line_number = line_number
        self.line = line
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class SourceReadError(SongDataError, OSError):
    """Raised when the song data source cannot be opened or read."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")
