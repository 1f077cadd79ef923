"""Tests for configuration loading and logging setup."""

import logging

import pytest
import yaml
from pydantic import ValidationError

from objtasks.core.config import (
    CONFIG_ENV_VAR,
    ObjTasksConfig,
    create_default_config,
    load_config,
)
from objtasks.core.logs import setup_logging


@pytest.fixture
def isolated_dir(tmp_path, monkeypatch):
    """Run in an empty directory with no user config."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    return tmp_path


class TestLoadConfig:
    """YAML configuration loading."""

    def test_defaults_when_no_file(self, isolated_dir):
        """Defaults are used when no config file exists."""
        config = load_config()
        assert config == ObjTasksConfig()
        assert config.serialization.indent is None
        assert config.logging.level == "INFO"

    def test_no_file_without_default(self, isolated_dir):
        """Missing config raises when defaults are disabled."""
        with pytest.raises(FileNotFoundError):
            load_config(allow_default=False)

    def test_explicit_missing_path(self, isolated_dir):
        """An explicit path must exist."""
        with pytest.raises(FileNotFoundError):
            load_config(str(isolated_dir / "missing.yaml"))

    def test_default_location(self, isolated_dir):
        """objtasks.config.yaml in the working directory is found."""
        (isolated_dir / "objtasks.config.yaml").write_text(
            "serialization:\n  indent: 4\n  sort_keys: true\n"
        )
        config = load_config()
        assert config.serialization.indent == 4
        assert config.serialization.sort_keys is True

    def test_env_var_path(self, isolated_dir, monkeypatch):
        """The environment variable names the config file."""
        path = isolated_dir / "custom.yaml"
        path.write_text("logging:\n  level: DEBUG\n")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
        assert load_config().logging.level == "DEBUG"

    def test_empty_file(self, isolated_dir):
        """An empty file gives the default config."""
        path = isolated_dir / "empty.yaml"
        path.write_text("")
        assert load_config(str(path)) == ObjTasksConfig()

    def test_invalid_content(self, isolated_dir):
        """Bad values fail validation."""
        path = isolated_dir / "bad.yaml"
        path.write_text("serialization:\n  indent: lots\n")
        with pytest.raises(ValidationError):
            load_config(str(path))

    def test_create_default_config(self, isolated_dir):
        """The written default config loads back unchanged."""
        path = isolated_dir / "out.yaml"
        config = create_default_config(str(path))
        assert yaml.safe_load(path.read_text()) == config.model_dump()
        assert load_config(str(path)) == config


class TestSetupLogging:
    """Root logger configuration."""

    @pytest.fixture(autouse=True)
    def restore_root_logger(self):
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        yield
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_level_from_config(self):
        """The level name is read case-insensitively."""
        config = ObjTasksConfig(logging={"level": "warning"})
        setup_logging(config.logging)
        assert logging.getLogger().level == logging.WARNING

    def test_verbose_forces_debug(self):
        """Verbose mode sets DEBUG."""
        setup_logging(verbose=True)
        assert logging.getLogger().level == logging.DEBUG
