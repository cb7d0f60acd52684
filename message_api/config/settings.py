"""Application configuration settings"""

import os
from dotenv import load_dotenv

load_dotenv()


def _as_bool(value: str) -> bool:
    return value.lower() in {"1", "true", "yes", "on"}


class Config:
    # Application
    APP_NAME = os.getenv("APP_NAME", "Organization Messages API")
    APP_ENV = os.getenv("APP_ENV", "development")
    TESTING = _as_bool(os.getenv("TESTING", "false"))
    DEBUG = _as_bool(os.getenv("DEBUG", "false"))

    # Server
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", "5001"))
    API_PREFIX = os.getenv("API_PREFIX", "/api/v1")
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*").split(",")

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    # Empty string disables file logging
    LOG_PATH = os.getenv("LOG_PATH", "logs/app_log.txt")
    LOG_FORMAT = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s [%(levelname)s] [%(correlation_id)s] %(name)s: %(message)s",
    )
    LOG_BACKUP_DAYS: int = int(os.getenv("LOG_BACKUP_DAYS", "7"))


class DevelopmentConfig(Config):
    """Development configuration"""

    DEBUG = True


class TestingConfig(Config):
    """Testing configuration"""

    TESTING = True
    LOG_PATH = ""


class ProductionConfig(Config):
    """Production configuration"""

    pass


# Configuration dictionary
config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
    "default": DevelopmentConfig,
}


def get_config(env=None):
    """Get configuration based on environment"""
    if env is None:
        env = os.getenv("APP_ENV", "development")
    return config.get(env, config["default"])
