"""Unit tests for the configuration context manager."""

import os
from unittest.mock import patch

import pytest

from src.catalog.runtime.config.config_data import ConfigData, LoggingConfig
from src.catalog.runtime.context import (
    AppContext,
    get_config,
    get_context,
    load_default_config,
    set_config,
    set_context,
    with_context,
)


class TestContextManager:
    """Test the context manager functionality."""

    def test_default_context_available(self):
        context = get_context()
        config = get_config()

        assert isinstance(context, AppContext)
        assert isinstance(config, ConfigData)
        assert context.config is config

    def test_with_context_override_single_level(self):
        original_config = get_config()
        original_url = original_config.database.url

        test_config = ConfigData()
        test_config.database.url = "sqlite://"

        with with_context(test_config):
            override_config = get_config()
            assert override_config.database.url == "sqlite://"
            assert override_config is not original_config

        after_config = get_config()
        assert after_config.database.url == original_url
        assert after_config is original_config

    def test_with_context_nested_overrides(self):
        original_config = get_config()

        level1_config = ConfigData()
        level1_config.database.url = "sqlite:///level1.db"
        level1_config.database.pool_size = 1

        with with_context(level1_config):
            level2_config = ConfigData()
            level2_config.logging.level = "DEBUG"

            with with_context(level2_config):
                level2 = get_config()
                assert level2.logging.level == "DEBUG"
                # Inherited from level 1
                assert level2.database.url == "sqlite:///level1.db"
                assert level2.database.pool_size == 1

            back_to_level1 = get_config()
            assert back_to_level1.logging.level == original_config.logging.level
            assert back_to_level1.database.pool_size == 1

        assert get_config() is original_config

    def test_partial_nested_override_keeps_siblings(self):
        original_config = get_config()

        override = ConfigData()
        override.database.echo = True

        with with_context(override):
            config = get_config()
            assert config.database.echo is True
            assert config.database.url == original_config.database.url
            assert config.database.pool_size == original_config.database.pool_size

    def test_explicit_section_replaces_current_section(self):
        changed = ConfigData()
        changed.logging.max_size_mb = 99

        with with_context(changed):
            reset = ConfigData(logging=LoggingConfig())
            with with_context(reset):
                assert get_config().logging.max_size_mb == LoggingConfig().max_size_mb
            assert get_config().logging.max_size_mb == 99

    def test_with_context_no_override(self):
        original_config = get_config()

        with with_context():
            assert get_config() is original_config

    def test_with_context_rejects_other_types(self):
        with pytest.raises(ValueError, match="config_override must be ConfigData"):
            with with_context({"database": {"url": "sqlite://"}}):  # type: ignore[arg-type]
                pass

    def test_context_restored_after_exception(self):
        original_config = get_config()
        override = ConfigData()
        override.app.name = "temporary"

        with pytest.raises(RuntimeError):
            with with_context(override):
                raise RuntimeError("boom")

        assert get_config() is original_config

    def test_set_config_replaces_configuration(self):
        original_context = get_context()
        replacement = ConfigData()
        replacement.app.name = "replaced"

        try:
            set_config(replacement)
            assert get_config() is replacement
        finally:
            set_context(original_context)


class TestLoadDefaultConfig:
    def test_missing_file_falls_back_to_defaults(self, tmp_path):
        env = {"CONFIG_PATH": str(tmp_path / "absent.yaml"), "APP_ENVIRONMENT": "test"}
        with patch.dict(os.environ, env, clear=True):
            config = load_default_config()

        assert config.app.environment == "test"
        assert config.database.environment_mode == "test"
        assert config.database.url == ConfigData().database.url

    def test_reads_configured_path(self, tmp_path):
        path = tmp_path / "catalog.yaml"
        path.write_text("config:\n  app:\n    name: from-file\n")

        with patch.dict(os.environ, {"CONFIG_PATH": str(path)}, clear=True):
            config = load_default_config()

        assert config.app.name == "from-file"

    def test_log_level_from_environment_overrides_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        path = tmp_path / "catalog.yaml"
        path.write_text("config:\n  logging:\n    level: INFO\n")

        env = {"CONFIG_PATH": str(path), "LOG_LEVEL": "DEBUG"}
        with patch.dict(os.environ, env, clear=True):
            config = load_default_config()

        assert config.logging.level == "DEBUG"

    def test_log_level_from_dotenv_applies_without_config_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / ".env").write_text(
            f"LOG_LEVEL=WARNING\nCONFIG_PATH={tmp_path / 'absent.yaml'}\n"
        )

        with patch.dict(os.environ, {}, clear=True):
            config = load_default_config()

        assert config.logging.level == "WARNING"

    def test_file_level_kept_when_log_level_unset(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        path = tmp_path / "catalog.yaml"
        path.write_text("config:\n  logging:\n    level: ERROR\n")

        with patch.dict(os.environ, {"CONFIG_PATH": str(path)}, clear=True):
            config = load_default_config()

        assert config.logging.level == "ERROR"
