"""Tests for configuration loading."""

import os
from pathlib import Path

import pytest

from song_lookup.core.config import (
    Config,
    LoggingConfig,
    create_default_config,
    get_config_dir,
    get_data_dir,
    get_log_file_path,
    load_config,
)


class TestDirectories:
    """Tests for XDG directory resolution."""

    def test_config_dir_from_xdg(self, isolated_dirs):
        assert get_config_dir() == isolated_dirs / "config" / "song-lookup"

    def test_data_dir_from_xdg(self, isolated_dirs):
        assert get_data_dir() == isolated_dirs / "data" / "song-lookup"

    def test_config_dir_default(self, monkeypatch, tmp_path):
        monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
        monkeypatch.setenv("HOME", str(tmp_path))
        assert get_config_dir() == tmp_path / ".config" / "song-lookup"

    def test_log_file_default(self, isolated_dirs):
        assert get_log_file_path(Config()) == isolated_dirs / "data" / "song-lookup" / "song-lookup.log"

    def test_log_file_from_config(self, tmp_path):
        config = Config(logging=LoggingConfig(log_file=str(tmp_path / "x.log")))
        assert get_log_file_path(config) == tmp_path / "x.log"


class TestLoadConfig:
    """Tests for load_config."""

    def test_creates_default_file_when_missing(self, isolated_dirs, capsys):
        path = isolated_dirs / "new" / "config.toml"

        config = load_config(path)

        assert path.exists()
        assert config == Config()
        assert "Created default configuration" in capsys.readouterr().out

    def test_default_template_parses_to_defaults(self, isolated_dirs):
        path = isolated_dirs / "config.toml"
        path.write_text(create_default_config(), encoding="utf-8")

        config = load_config(path)

        assert config.data.csv_path == "data.csv"
        assert config.data.has_header is True
        assert config.lookup.default_song_id == "4BJqT0PrAfrxzMOxytFOIz"
        assert config.ui.window_title == "Song Lookup"
        assert config.logging.level == "INFO"

    def test_reads_sections(self, isolated_dirs):
        path = isolated_dirs / "config.toml"
        path.write_text(
            """
[data]
csv_path = "/srv/songs.csv"
has_header = false

[lookup]
default_song_id = "abc123"

[ui]
use_colors = false
window_title = "Find a Song"

[logging]
level = "debug"
log_file = "/tmp/song-lookup-test.log"
console_output = true
""",
            encoding="utf-8",
        )

        config = load_config(path)

        assert config.data.csv_path == "/srv/songs.csv"
        assert config.data.has_header is False
        assert config.lookup.default_song_id == "abc123"
        assert config.ui.use_colors is False
        assert config.ui.window_title == "Find a Song"
        assert config.logging.level == "DEBUG"
        assert config.logging.log_file == "/tmp/song-lookup-test.log"
        assert config.logging.console_output is True

    def test_partial_section_keeps_defaults(self, isolated_dirs):
        path = isolated_dirs / "config.toml"
        path.write_text('[data]\ncsv_path = "songs.csv"\n', encoding="utf-8")

        config = load_config(path)

        assert config.data.csv_path == "songs.csv"
        assert config.data.has_header is True
        assert config.ui == Config().ui

    def test_expands_home_in_csv_path(self, isolated_dirs, monkeypatch):
        monkeypatch.setenv("HOME", str(isolated_dirs))
        path = isolated_dirs / "config.toml"
        path.write_text('[data]\ncsv_path = "~/songs.csv"\n', encoding="utf-8")

        assert load_config(path).data.csv_path == str(isolated_dirs / "songs.csv")

    def test_invalid_log_level_falls_back(self, isolated_dirs, capsys):
        path = isolated_dirs / "config.toml"
        path.write_text('[logging]\nlevel = "LOUD"\n', encoding="utf-8")

        config = load_config(path)

        assert config.logging.level == "INFO"
        assert "Invalid log level" in capsys.readouterr().out

    def test_malformed_toml_uses_defaults(self, isolated_dirs, capsys):
        path = isolated_dirs / "config.toml"
        path.write_text("[data\ncsv_path = ", encoding="utf-8")

        assert load_config(path) == Config()
        assert "Using default configuration" in capsys.readouterr().out

    def test_env_overrides_csv_path(self, isolated_dirs, monkeypatch):
        path = isolated_dirs / "config.toml"
        path.write_text('[data]\ncsv_path = "songs.csv"\n', encoding="utf-8")
        monkeypatch.setenv("SONG_LOOKUP_CSV_PATH", "/data/override.csv")

        assert load_config(path).data.csv_path == "/data/override.csv"

    def test_dotenv_in_config_dir(self, isolated_dirs, monkeypatch):
        """Test a .env file next to the global config is loaded."""
        env_dir = get_config_dir()
        env_dir.mkdir(parents=True)
        (env_dir / ".env").write_text("SONG_LOOKUP_CSV_PATH=/from/dotenv.csv\n", encoding="utf-8")
        path = isolated_dirs / "config.toml"
        path.write_text(create_default_config(), encoding="utf-8")

        try:
            assert load_config(path).data.csv_path == "/from/dotenv.csv"
        finally:
            os.environ.pop("SONG_LOOKUP_CSV_PATH", None)


class TestLoggingConfigValidate:
    """Tests for LoggingConfig.validate."""

    @pytest.mark.parametrize("level", ["DEBUG", "info", "Warning", "ERROR"])
    def test_valid_levels(self, level):
        LoggingConfig(level=level).validate()

    def test_invalid_level(self):
        with pytest.raises(ValueError, match="Invalid log level"):
            LoggingConfig(level="CHATTY").validate()


def test_default_config_is_valid_toml():
    import tomllib

    data = tomllib.loads(create_default_config())
    assert set(data) == {"data", "lookup", "ui", "logging"}
    assert data["data"]["csv_path"] == "data.csv"
