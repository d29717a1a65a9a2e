"""
VeinMiner Tool Package

- template: matching rules for held items (material or name/lore based)
- category: named groups of templates with their own config and block list
- registry: resolves a held item to its category
"""

from .template import (
    ToolTemplate,
    MaterialTemplate,
    ItemStackTemplate,
    is_template,
    template_for,
)
from .category import ToolCategory
from .registry import CategoryRegistry, MatchResult, HAND_ID, create_registry

__all__ = [
    "ToolTemplate",
    "MaterialTemplate",
    "ItemStackTemplate",
    "is_template",
    "template_for",
    "ToolCategory",
    "CategoryRegistry",
    "MatchResult",
    "HAND_ID",
    "create_registry",
]
