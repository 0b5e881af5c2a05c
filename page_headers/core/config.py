"""Core configuration module for page-headers."""
import os

from dotenv import load_dotenv

load_dotenv()


class Config:
    """Base configuration class."""

    TESTING = False

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_FORMAT = os.getenv("LOG_FORMAT", "json")  # json or text
    LOG_FILE = os.getenv("LOG_FILE")

    # Pagination headers
    PAGE_HEADERS_EXPOSE = os.getenv("PAGE_HEADERS_EXPOSE", "True").lower() == "true"


class DevelopmentConfig(Config):
    """Development configuration."""

    LOG_LEVEL = "DEBUG"
    LOG_FORMAT = "text"


class TestingConfig(Config):
    """Testing configuration."""

    TESTING = True
    LOG_LEVEL = "DEBUG"
    LOG_FORMAT = "text"
    LOG_FILE = None


class ProductionConfig(Config):
    """Production configuration."""

    LOG_FORMAT = "json"


config_by_name = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
    "default": DevelopmentConfig,
}

# Keys PageHeaders.init_app fills in when the host app leaves them unset
CONFIG_KEYS = ("LOG_LEVEL", "LOG_FORMAT", "LOG_FILE", "PAGE_HEADERS_EXPOSE")


def get_config() -> Config:
    """Get configuration based on FLASK_ENV environment variable."""
    env = os.getenv("FLASK_ENV", "development")
    return config_by_name.get(env, DevelopmentConfig)()
