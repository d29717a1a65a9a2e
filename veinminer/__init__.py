"""
VeinMiner - tool categories and template matching

This package provides:
- Item, block list and algorithm config models
- Tool templates matching held items by material, name and lore
- Tool categories grouping templates with their own config and block list
- A category registry resolving a held item to its category
"""

from .models import AlgorithmConfig, BlockList, ItemStack, Material, is_empty
from .tool import (
    CategoryRegistry,
    ItemStackTemplate,
    MatchResult,
    MaterialTemplate,
    ToolCategory,
    create_registry,
)

__all__ = [
    "AlgorithmConfig",
    "BlockList",
    "ItemStack",
    "Material",
    "is_empty",
    "CategoryRegistry",
    "ItemStackTemplate",
    "MatchResult",
    "MaterialTemplate",
    "ToolCategory",
    "create_registry",
]

__version__ = "0.1.0"
