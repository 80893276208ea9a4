"""Application context for explicit state passing.

AppContext bundles the configuration, the song store and the console so
command handlers receive everything they need as one argument.
"""

from dataclasses import dataclass, field, replace
from typing import Optional

from rich.console import Console

from song_lookup.core.config import Config
from song_lookup.domain.songs import SongStore


@dataclass
class AppContext:
    """Application context passed to all command handlers.

    Attributes:
        config: Application configuration
        store: Song store shared by all commands
        console: Rich Console for formatted output
        source_path: Path of the most recent successful load, if any
    """

    config: Config
    store: SongStore = field(default_factory=SongStore)
    console: Optional[Console] = None
    source_path: Optional[str] = None

    @classmethod
    def create(cls, config: Config, console: Optional[Console] = None) -> "AppContext":
        """Create initial application context with an empty store."""
        return cls(config=config, store=SongStore(), console=console)

    def with_source_path(self, source_path: str) -> "AppContext":
        """Return new context with updated source path."""
        return replace(self, source_path=source_path)
