"""Tests for settings and logging setup."""

import structlog
from py_climate.config import Settings
from py_climate.utils import configure_logging
from py_climate.utils.random import RandomStream


class TestSettings:
    """Test environment driven settings."""

    def test_defaults(self, monkeypatch):
        for name in ("LOG_LEVEL", "DEFAULT_SEED", "DEFAULT_YEARS", "YEAR_LENGTH", "BIOME_SCHEME"):
            monkeypatch.delenv(f"PY_CLIMATE_{name}", raising=False)

        settings = Settings()

        assert settings.log_level == "INFO"
        assert settings.default_seed == 0
        assert settings.default_years == 1
        assert settings.year_length == 365
        assert settings.biome_scheme == "elevation"

    def test_model_config(self):
        assert Settings.model_config["env_prefix"] == "PY_CLIMATE_"
        assert Settings.model_config["extra"] == "ignore"

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("PY_CLIMATE_DEFAULT_YEARS", "3")
        monkeypatch.setenv("PY_CLIMATE_BIOME_SCHEME", "redblob")

        settings = Settings()

        assert settings.default_years == 3
        assert settings.biome_scheme == "redblob"


class TestLogging:
    """Test structlog configuration."""

    def test_configure_console_logging(self):
        configure_logging(level="debug", fmt="console")

        logger = structlog.get_logger()
        logger.info("Console logging configured", check=True)

    def test_configure_json_logging(self):
        configure_logging(level="warning", fmt="json")

        logger = structlog.get_logger()
        logger.warning("JSON logging configured", check=True)


class TestRandomStream:
    """Test the seeded random stream."""

    def test_same_seed_same_sequence(self):
        first = RandomStream(12)
        second = RandomStream(12)

        assert [first.randint(4) for _ in range(20)] == [second.randint(4) for _ in range(20)]
        assert first.noise2(0.3, 12.0) == second.noise2(0.3, 12.0)
        assert first.call_count == 20

    def test_randint_range(self):
        stream = RandomStream(1)
        values = {stream.randint(4) for _ in range(200)}

        assert values <= {0, 1, 2, 3}
