"""
Configuration management for Song Lookup
"""

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

CSV_PATH_ENV = "SONG_LOOKUP_CSV_PATH"

VALID_LOG_LEVELS = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}


@dataclass
class DataConfig:
    """Configuration for the song data source."""

    csv_path: str = "data.csv"
    has_header: bool = True


@dataclass
class LookupConfig:
    """Configuration for console lookups."""

    # Song looked up by the `show` command when no --id is given
    default_song_id: str = "4BJqT0PrAfrxzMOxytFOIz"


@dataclass
class UIConfig:
    """Configuration for user interface."""

    use_colors: bool = True
    window_title: str = "Song Lookup"


@dataclass
class LoggingConfig:
    """Configuration for logging."""

    level: str = "INFO"  # TRACE, DEBUG, INFO, SUCCESS, WARNING, ERROR, CRITICAL
    log_file: Optional[str] = (
        None  # Custom log file path (default: ~/.local/share/song-lookup/song-lookup.log)
    )
    console_output: bool = False  # Also log to stderr (for debugging)

    def validate(self) -> None:
        """Validate logging configuration values.

        Raises:
            ValueError: If the level is not a known log level
        """
        if self.level.upper() not in VALID_LOG_LEVELS:
            raise ValueError(
                f"Invalid log level: {self.level!r}. "
                f"Valid levels are: {sorted(VALID_LOG_LEVELS)}"
            )


@dataclass
class Config:
    """Main configuration object."""

    data: DataConfig = field(default_factory=DataConfig)
    lookup: LookupConfig = field(default_factory=LookupConfig)
    ui: UIConfig = field(default_factory=UIConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def get_config_dir() -> Path:
    """Get the configuration directory path."""
    config_home = os.environ.get("XDG_CONFIG_HOME")
    if config_home:
        return Path(config_home) / "song-lookup"
    return Path.home() / ".config" / "song-lookup"


def _find_project_config() -> Optional[Path]:
    """Find config.toml in project root by looking for pyproject.toml.

    Returns:
        Path to config.toml in project root, or None if not found
    """
    current = Path(__file__).resolve().parent
    for parent in [current] + list(current.parents):
        if (parent / "pyproject.toml").exists():
            config_path = parent / "config.toml"
            if config_path.exists():
                return config_path
            # Found project root but no config.toml there
            return None
    return None


def get_config_path() -> Path:
    """Get the main configuration file path.

    Checks for config.toml in the following order:
    1. Project root (detected via pyproject.toml) - for development
    2. Current working directory
    3. XDG_CONFIG_HOME/song-lookup (or ~/.config/song-lookup)
    """
    project_config = _find_project_config()
    if project_config:
        return project_config

    local_config = Path.cwd() / "config.toml"
    if local_config.exists():
        return local_config

    return get_config_dir() / "config.toml"


def get_data_dir() -> Path:
    """Get the data directory path."""
    data_home = os.environ.get("XDG_DATA_HOME")
    if data_home:
        return Path(data_home) / "song-lookup"
    return Path.home() / ".local" / "share" / "song-lookup"


def get_log_file_path(config: Config) -> Path:
    """Resolve the log file path from config, falling back to the data dir."""
    if config.logging.log_file:
        return Path(config.logging.log_file)
    return get_data_dir() / "song-lookup.log"


def create_default_config() -> str:
    """Create a default configuration TOML content."""
    return """
# Song Lookup Configuration

[data]
# CSV file with one header line followed by 19-field song rows
# (overridden by --file or the SONG_LOOKUP_CSV_PATH environment variable)
csv_path = "data.csv"

# Skip the first line of the file
has_header = true

[lookup]
# Song ID looked up by `song-lookup show` when --id is not given
default_song_id = "4BJqT0PrAfrxzMOxytFOIz"

[ui]
# Use colors in terminal output
use_colors = true

# Title of the interactive search window
window_title = "Song Lookup"

[logging]
# Log level: TRACE, DEBUG, INFO, SUCCESS, WARNING, ERROR, CRITICAL
level = "INFO"

# Custom log file path (default: ~/.local/share/song-lookup/song-lookup.log)
# log_file = "/path/to/song-lookup.log"

# Also write logs to stderr
console_output = false
"""


def load_config(config_path: Optional[Path] = None) -> Config:
    """Load configuration from file or create default.

    Args:
        config_path: Explicit config file; defaults to get_config_path()

    Environment variables override TOML values:
    - SONG_LOOKUP_CSV_PATH
    """
    from dotenv import load_dotenv

    env_path = get_config_dir() / ".env"
    if env_path.exists():
        load_dotenv(env_path)

    if config_path is None:
        config_path = get_config_path()

    if not config_path.exists():
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            f.write(create_default_config())
        print(f"Created default configuration at: {config_path}")
        return _apply_env_overrides(Config())

    try:
        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)

        config = Config()

        if "data" in toml_data:
            data = toml_data["data"]
            config.data = DataConfig(
                csv_path=str(
                    Path(data.get("csv_path", config.data.csv_path)).expanduser()
                ),
                has_header=data.get("has_header", config.data.has_header),
            )

        if "lookup" in toml_data:
            lookup_data = toml_data["lookup"]
            config.lookup = LookupConfig(
                default_song_id=str(
                    lookup_data.get("default_song_id", config.lookup.default_song_id)
                ),
            )

        if "ui" in toml_data:
            ui_data = toml_data["ui"]
            config.ui = UIConfig(
                use_colors=ui_data.get("use_colors", config.ui.use_colors),
                window_title=ui_data.get("window_title", config.ui.window_title),
            )

        if "logging" in toml_data:
            logging_data = toml_data["logging"]
            log_file = logging_data.get("log_file")
            if log_file:
                log_file = str(Path(log_file).expanduser())
            config.logging = LoggingConfig(
                level=logging_data.get("level", config.logging.level).upper(),
                log_file=log_file,
                console_output=logging_data.get(
                    "console_output", config.logging.console_output
                ),
            )
            try:
                config.logging.validate()
            except ValueError as e:
                print(f"Warning: Invalid logging configuration: {e}")
                print("Using INFO level.")
                config.logging.level = "INFO"

        return _apply_env_overrides(config)

    except tomllib.TOMLDecodeError as e:
        print(f"Error loading config file {config_path}: {e}")
        print("Using default configuration.")
        return _apply_env_overrides(Config())


def _apply_env_overrides(config: Config) -> Config:
    csv_path = os.environ.get(CSV_PATH_ENV)
    if csv_path:
        config.data.csv_path = csv_path
    return config
