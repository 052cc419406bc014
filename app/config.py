"""
Configuration settings for the YouTube transcript summarizer application.
"""

import os
from typing import Optional
from pathlib import Path
from dotenv import load_dotenv


# Ensure environment variables are loaded
load_dotenv()


def _first_env(*names: str) -> Optional[str]:
    """Return the first non-empty environment variable among ``names``."""
    for name in names:
        value = os.getenv(name)
        if value:
            return value
    return None


def _optional_float(value: Optional[str]) -> Optional[float]:
    return float(value) if value else None


def _optional_int(value: Optional[str]) -> Optional[int]:
    return int(value) if value else None


class Config:
    """Base configuration class."""

    # Application info
    APP_NAME = "YouTube Transcript Summarizer"
    APP_VERSION = "0.2.0"

    # Data directories
    BASE_DIR = Path(__file__).resolve().parent.parent.absolute()
    DATA_DIR = BASE_DIR / "data"
    SUMMARIES_DIR = DATA_DIR / "summaries"

    # API keys
    GEMINI_KEY = _first_env("GEMINI_KEY", "GEMINI_API_KEY")

    # Optional outbound proxy for the caption scraper
    PROXY_URL = _first_env("HTTP_PROXY", "PROXY_URL")

    # Default models
    DEFAULT_SUMMARY_MODEL = os.getenv("GEMINI_MODEL", "gemini-1.5-flash")
    TRANSCRIPT_LANGUAGE = os.getenv("TRANSCRIPT_LANGUAGE", "en")

    # Optional generation settings; unset means the model defaults
    SUMMARY_TEMPERATURE = _optional_float(os.getenv("SUMMARY_TEMPERATURE"))
    SUMMARY_MAX_TOKENS = _optional_int(os.getenv("SUMMARY_MAX_TOKENS"))

    PUBLIC_URL = os.getenv("PUBLIC_URL", "http://localhost:8000")

    DEBUG = False
    LOG_LEVEL = "INFO"

    @classmethod
    def initialize(cls):
        """Initialize the application configuration."""
        from app.utils.logger import logging

        cls.SUMMARIES_DIR.mkdir(parents=True, exist_ok=True)

        # Validate required environment variables
        if not cls.GEMINI_KEY:
            logging.warning("GEMINI_KEY environment variable not set.")
            logging.warning("Please set it in the .env file or environment variables.")


class DevelopmentConfig(Config):
    """Development configuration."""

    DEBUG = True
    LOG_LEVEL = "DEBUG"


class ProductionConfig(Config):
    """Production configuration."""

    DEBUG = False
    LOG_LEVEL = "INFO"


# Determine which configuration to use based on environment
def get_config():
    """Get the appropriate configuration based on environment."""
    env = os.getenv("ENVIRONMENT", "development").lower()
    if env == "production":
        return ProductionConfig
    else:
        return DevelopmentConfig


# Create a config instance
config = get_config()
