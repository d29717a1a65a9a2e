"""
Data models for VeinMiner.
"""

from .item import Material, ItemStack, is_empty
from .algorithm import AlgorithmConfig
from .blocklist import BlockList
from .config import LoggingConfig, AppConfig

__all__ = [
    # Item models
    "Material",
    "ItemStack",
    "is_empty",
    # Collaborators owned by tool categories
    "AlgorithmConfig",
    "BlockList",
    # Config models
    "LoggingConfig",
    "AppConfig",
]
