"""Unit tests for the application context."""

import pytest

from src.product_app.runtime.config.config_data import ConfigData
from src.product_app.runtime.context import (
    AppContext,
    get_config,
    get_context,
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

    def test_test_environment_is_loaded(self):
        assert get_config().app.environment == "test"
        assert get_config().database.url == "sqlite://"

    def test_with_context_override_single_level(self):
        original_config = get_config()
        original_host = original_config.app.host

        test_config = ConfigData()
        test_config.app.host = "custom_host"

        with with_context(test_config):
            override_config = get_config()
            assert override_config.app.host == "custom_host"
            assert override_config is not original_config

        assert get_config().app.host == original_host
        assert get_config() is original_config

    def test_with_context_inherits_unset_fields(self):
        test_config = ConfigData()
        test_config.logging.level = "DEBUG"

        with with_context(test_config):
            config = get_config()
            assert config.logging.level == "DEBUG"
            assert config.database.url == "sqlite://"
            assert config.app.environment == "test"

    def test_with_context_nested_overrides(self):
        level1 = ConfigData()
        level1.app.port = 8001

        with with_context(level1):
            level2 = ConfigData()
            level2.database.url = "sqlite:///level2.db"

            with with_context(level2):
                config = get_config()
                assert config.app.port == 8001
                assert config.database.url == "sqlite:///level2.db"

            assert get_config().database.url == "sqlite://"

    def test_with_context_none_is_noop(self):
        original = get_config()

        with with_context(None):
            assert get_config() is original

    def test_with_context_rejects_other_types(self):
        with pytest.raises(ValueError, match="config_override must be ConfigData"):
            with with_context({"app": {"port": 1}}):  # type: ignore[arg-type]
                pass

    def test_set_config_replaces_configuration(self):
        original = get_context()
        replacement = ConfigData()
        try:
            set_config(replacement)
            assert get_config() is replacement
        finally:
            set_context(original)

    def test_app_config_has_only_declared_fields(self):
        app_config = ConfigData().app

        assert set(app_config.model_dump()) == {"environment", "name", "host", "port", "cors"}
        assert not hasattr(app_config, "base_url")
