"""
Environment settings for VeinMiner.

Loads process-level settings from environment variables (and a .env file)
with sensible defaults for local development.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


@dataclass
class Settings:
    """Process-level settings read from the environment."""
    log_level: str = os.getenv("LOG_LEVEL", "INFO")


def get_settings() -> Settings:
    """Get the environment settings."""
    return Settings()


# Global settings instance
settings = get_settings()
