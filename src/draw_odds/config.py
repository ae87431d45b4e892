"""Configuration settings for the draw odds estimator."""

import os


def _optional_int(value: str | None) -> int | None:
    """Parse an optional integer environment value ('' counts as unset)."""
    if value is None or value.strip() == "":
        return None
    return int(value)


class Config:
    """Base configuration class."""

    # Estimation settings
    SAMPLE_SIZE = int(os.environ.get("DRAW_ODDS_SAMPLE_SIZE", "750000"))
    SEED = _optional_int(os.environ.get("DRAW_ODDS_SEED"))
    WORKERS = int(os.environ.get("DRAW_ODDS_WORKERS", "1"))

    # Logging settings (log output goes to stderr)
    LOG_LEVEL = os.environ.get("DRAW_ODDS_LOG_LEVEL", "WARNING").upper()
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class DevelopmentConfig(Config):
    """Development configuration."""

    LOG_LEVEL = os.environ.get("DRAW_ODDS_LOG_LEVEL", "DEBUG").upper()


class TestingConfig(Config):
    """Testing configuration."""

    # Small, seeded runs so results are fast and repeatable
    SAMPLE_SIZE = 2000
    SEED = 1234
    WORKERS = 1
    LOG_LEVEL = "DEBUG"


class ProductionConfig(Config):
    """Production configuration."""


# Configuration mapping
config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
    "default": ProductionConfig,
}


def get_config(config_name: str | None = None) -> type[Config]:
    """Get configuration class based on environment."""
    if config_name is None:
        config_name = os.environ.get("DRAW_ODDS_ENV", "default")

    return config.get(config_name, config["default"])
