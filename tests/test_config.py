"""Tests for configuration loading."""

import pytest

from fsmaint.config import ConfigManager, FsMaintConfig, LoggingSettings, PathSettings
from fsmaint.paths import MAX_PATH


@pytest.fixture
def no_default_locations(tmp_path, monkeypatch):
    """Point the default search locations at an empty directory."""
    monkeypatch.setattr(
        ConfigManager,
        "DEFAULT_CONFIG_LOCATIONS",
        [tmp_path / "fsmaint.yaml", tmp_path / "config.yaml"],
    )
    return tmp_path


class TestModels:
    """Tests for the config models."""

    def test_defaults(self):
        """Test default values."""
        config = FsMaintConfig()
        assert config.paths.max_path == MAX_PATH
        assert config.logging.level == "WARNING"
        assert config.logging.file_enabled is False

    def test_level_normalized(self):
        """Test that log levels are upper-cased."""
        assert LoggingSettings(level="debug").level == "DEBUG"

    def test_invalid_level(self):
        """Test that unknown log levels are rejected."""
        with pytest.raises(ValueError):
            LoggingSettings(level="loud")

    def test_max_path_lower_bound(self):
        """Test that a path limit must leave room for one byte and the terminator."""
        assert PathSettings(max_path=2).max_path == 2
        with pytest.raises(ValueError):
            PathSettings(max_path=1)

    def test_unknown_keys_rejected(self):
        """Test that typos in the config are errors."""
        with pytest.raises(ValueError):
            FsMaintConfig(pahts={"max_path": 10})


class TestConfigManager:
    """Tests for ConfigManager."""

    def test_defaults_without_file(self, no_default_locations):
        """Test that a missing config file gives the defaults."""
        manager = ConfigManager()
        config = manager.load()

        assert config == FsMaintConfig()
        assert manager.config_path is None

    def test_default_location_found(self, no_default_locations):
        """Test loading from a default location."""
        location = no_default_locations / "config.yaml"
        location.write_text("paths:\n  max_path: 64\n")

        manager = ConfigManager()
        config = manager.load()

        assert config.paths.max_path == 64
        assert manager.config_path == location

    def test_explicit_path(self, tmp_path):
        """Test loading an explicit file."""
        path = tmp_path / "custom.yaml"
        path.write_text("logging:\n  level: info\n  console_enabled: false\n")

        config = ConfigManager(path).load()

        assert config.logging.level == "INFO"
        assert config.logging.console_enabled is False

    def test_empty_file(self, tmp_path):
        """Test that an empty file means defaults."""
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert ConfigManager(path).load() == FsMaintConfig()

    def test_explicit_path_missing(self, tmp_path):
        """Test that an explicit but missing file is an error."""
        with pytest.raises(FileNotFoundError):
            ConfigManager(tmp_path / "missing.yaml").load()

    def test_invalid_yaml(self, tmp_path):
        """Test that malformed YAML is reported with the file name."""
        path = tmp_path / "bad.yaml"
        path.write_text("paths: [unclosed\n")

        with pytest.raises(ValueError, match="Invalid YAML"):
            ConfigManager(path).load()

    def test_invalid_values(self, tmp_path):
        """Test that invalid values are reported with the file name."""
        path = tmp_path / "bad.yaml"
        path.write_text("paths:\n  max_path: 0\n")

        with pytest.raises(ValueError, match="Invalid configuration"):
            ConfigManager(path).load()

    def test_non_mapping(self, tmp_path):
        """Test a config file that is not a mapping."""
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")

        with pytest.raises(ValueError, match="Invalid configuration"):
            ConfigManager(path).load()

    def test_config_property_loads_once(self, no_default_locations):
        """Test the cached config property."""
        manager = ConfigManager()
        assert manager.config is manager.config
