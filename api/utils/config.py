# api/utils/config.py
import os
import logging

logger = logging.getLogger("container_configurator.api")

class Config:
    """Application configuration loaded from environment variables"""

    # API authentication
    API_KEY = os.environ.get("API_KEY", "dev_key")

    # Application settings
    DEBUG = os.environ.get("DEBUG", "false").lower() == "true"
    ENVIRONMENT = os.environ.get("ENVIRONMENT", "development")

    # Upper bound on concurrently held sessions (oldest evicted first)
    MAX_SESSIONS = int(os.environ.get("MAX_SESSIONS", "100"))

    @classmethod
    def validate(cls):
        """Validate critical configuration values"""
        if not cls.API_KEY or cls.API_KEY == "dev_key":
            logger.warning("Using development API key - not secure for production!")

        if cls.MAX_SESSIONS < 1:
            logger.error(f"MAX_SESSIONS must be positive, got {cls.MAX_SESSIONS}")
