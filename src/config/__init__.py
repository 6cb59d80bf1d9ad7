import os

from .config import BaseConfig, ConfigError, build_database_uri
from .dev_config import DevConfig
from .production import ProductionConfig
from .testing import TestingConfig

CONFIGS = {
    "development": DevConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
}


def get_config(name=None):
    name = (name or os.getenv("APP_ENV") or "development").lower()
    try:
        return CONFIGS[name]
    except KeyError:
        raise ConfigError(f"Unknown APP_ENV '{name}' (expected one of: {', '.join(CONFIGS)})")
