"""
Category Registry - resolves held items to their tool category.

The registry is a plain value owned by the application and handed to the
components that need it (config loading, mining handlers). Categories are
kept in registration order, so when several categories accept the same item
the one registered first wins.
"""

import logging
from typing import NamedTuple, Optional

from ..models.algorithm import AlgorithmConfig
from ..models.item import ItemStack, is_empty
from .category import ToolCategory
from .template import ToolTemplate

logger = logging.getLogger(__name__)

HAND_ID = "Hand"


class MatchResult(NamedTuple):
    """A resolved category and the template that accepted the item."""

    category: Optional[ToolCategory]
    template: Optional[ToolTemplate]

    @classmethod
    def empty(cls) -> "MatchResult":
        """The result for an item no category accepts."""
        return cls(None, None)

    @property
    def is_empty(self) -> bool:
        return self.category is None

    def __bool__(self) -> bool:
        return self.category is not None


class CategoryRegistry:
    """Registry of tool categories keyed by lowercased id."""

    def __init__(self, hand: ToolCategory) -> None:
        """
        Initialize an empty registry.

        Args:
            hand: The category used when no tool is held. It is not registered
                here; see create_registry().
        """
        if hand is None:
            raise ValueError("Hand category must not be None")
        self._hand = hand
        self._categories: dict[str, ToolCategory] = {}

    @property
    def hand(self) -> ToolCategory:
        """The category representing an empty hand."""
        return self._hand

    def register(self, category: ToolCategory) -> None:
        """
        Register a tool category.

        A category whose lowercased id is already registered replaces the
        existing one. Nothing is merged.
        """
        if not isinstance(category, ToolCategory):
            raise ValueError(f"Cannot register {category!r} as a tool category")

        key = category.id.lower()
        existing = self._categories.get(key)
        if existing is not None and existing is not category:
            if existing.id != category.id:
                logger.warning(
                    f"Category '{category.id}' replaces '{existing.id}' (ids differ only by case)"
                )
            else:
                logger.info(f"Replacing registered category '{category.id}'")

        self._categories[key] = category
        logger.debug(f"Registered category '{category.id}'")

    def get(self, category_id: str) -> Optional[ToolCategory]:
        """Get a category by its id, ignoring letter case."""
        if not isinstance(category_id, str):
            return None
        return self._categories.get(category_id.lower())

    def get_by_item(self, item: Optional[ItemStack]) -> Optional[ToolCategory]:
        """
        Get the category an item belongs to.

        An empty hand always resolves to the hand category. Otherwise the first
        registered category with a matching template is returned, or None.
        """
        return self.get_with_template(item).category

    def get_with_template(self, item: Optional[ItemStack]) -> MatchResult:
        """
        Get the category an item belongs to along with the template it matched.

        Categories are searched in registration order and templates in the
        order they were added.

        Returns:
            MatchResult(hand, None) for an empty hand, the matching category and
            template, or MatchResult.empty() if no category accepts the item
        """
        if is_empty(item):
            return MatchResult(self._hand, None)

        for category in self._categories.values():
            for template in category.iter_tools():
                if template.matches(item):
                    return MatchResult(category, template)

        return MatchResult.empty()

    def get_all(self) -> tuple[ToolCategory, ...]:
        """Get an immutable snapshot of all registered categories."""
        return tuple(self._categories.values())

    def get_registered_amount(self) -> int:
        return len(self._categories)

    def clear_categories(self) -> None:
        """Remove every registered category. The hand category is not re-added."""
        self._categories.clear()
        logger.debug("Cleared all tool categories")

    def __contains__(self, category_id: object) -> bool:
        return isinstance(category_id, str) and category_id.lower() in self._categories

    def __repr__(self) -> str:
        ids = ", ".join(category.id for category in self._categories.values())
        return f"CategoryRegistry([{ids}])"


def create_registry(defaults: AlgorithmConfig) -> CategoryRegistry:
    """
    Create a registry with the hand category registered.

    Args:
        defaults: Global algorithm config the hand category is seeded from

    Returns:
        A registry holding only the hand category
    """
    hand = ToolCategory(HAND_ID, defaults)
    registry = CategoryRegistry(hand)
    registry.register(hand)
    return registry
