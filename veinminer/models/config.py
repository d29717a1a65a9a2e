"""
Configuration models for VeinMiner.

Defines dataclasses for the YAML configuration file.
"""

from dataclasses import dataclass, field

from .algorithm import AlgorithmConfig


@dataclass
class LoggingConfig:
    """Configuration for logging."""
    level: str = "INFO"


@dataclass
class AppConfig:
    """
    Application configuration container.

    Holds the configuration sections loaded from the YAML config file.
    """
    version: str = "1.0"
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    algorithm: AlgorithmConfig = field(default_factory=AlgorithmConfig)

    @property
    def log_level(self) -> str:
        """Shortcut for logging.level."""
        return self.logging.level
