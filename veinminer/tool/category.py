"""
Tool categories.

A category groups the tool templates that share one algorithm configuration
and one block list. When a player vein mines, the category of the held item
decides how far the traversal may go and which blocks it may visit.
"""

import logging
import re
from typing import Any, Iterator, Mapping, Optional, Union

from ..models.algorithm import AlgorithmConfig
from ..models.blocklist import BlockList
from ..models.item import ItemStack, Material
from .template import ItemStackTemplate, MaterialTemplate, ToolTemplate, is_template

logger = logging.getLogger(__name__)

VALID_ID = re.compile(r"[A-Za-z0-9]+")

# Marks a block list argument that was not supplied at all, as opposed to None
_DEFAULT_BLOCKLIST: Any = object()


class ToolCategory:
    """
    A named category of tools with its own algorithm config and block list.

    Templates keep their insertion order and are never duplicated. Two
    categories are equal when their ids are identical, letter case included.
    """

    def __init__(
        self,
        category_id: str,
        defaults: AlgorithmConfig,
        *templates: ToolTemplate,
        blocklist: BlockList = _DEFAULT_BLOCKLIST,
        settings: Optional[Mapping[str, Any]] = None,
    ) -> None:
        """
        Create a tool category.

        Args:
            category_id: Unique id, one or more ASCII letters or digits.
                A single PascalCase word is recommended (e.g. "Pickaxe").
            defaults: Global algorithm config. The category keeps its own copy.
            *templates: Initial tool templates
            blocklist: Block list owned by the category. Defaults to an empty one.
            settings: Category-level algorithm settings, overriding the defaults

        Raises:
            ValueError: If any argument is missing or malformed
        """
        if not isinstance(category_id, str) or not VALID_ID.fullmatch(category_id):
            raise ValueError(
                "Invalid category ID. Must be non-null and alphanumeric with no spaces"
            )
        if defaults is None:
            raise ValueError("Global algorithm config must not be None")
        if blocklist is _DEFAULT_BLOCKLIST:
            blocklist = BlockList()
        elif blocklist is None:
            raise ValueError("Blocklist must not be None")
        for template in templates:
            if not is_template(template):
                raise ValueError(f"Invalid tool template: {template!r}")

        config = defaults.copy()
        if settings:
            config.read_from(settings)

        self._id = category_id
        self._config = config
        self._blocklist = blocklist
        self._tools: list[ToolTemplate] = []

        for template in templates:
            self.add_tool(template)

    @property
    def id(self) -> str:
        return self._id

    @property
    def config(self) -> AlgorithmConfig:
        """Algorithm config for this category. Takes precedence over the global one."""
        return self._config

    @property
    def blocklist(self) -> BlockList:
        return self._blocklist

    def add_tool(self, template: ToolTemplate) -> None:
        """Add a template. Adding one that is already present does nothing."""
        if not is_template(template):
            raise ValueError(f"Cannot add an invalid template: {template!r}")

        if template in self._tools:
            return

        self._tools.append(template)
        logger.debug(f"Added {template} to category {self._id}")

    def remove_tool(self, target: Union[ToolTemplate, ItemStack, Material]) -> bool:
        """
        Remove templates from this category.

        The target decides what is removed:
        - a template: that exact template
        - an item: every template matching the item, named or not
        - a material: only plain material templates for it. Templates with a
          name or lore are kept, so a coarse removal cannot destroy them.

        Returns:
            True if anything was removed
        """
        if is_template(target):
            if target not in self._tools:
                return False
            self._tools.remove(target)
            return True

        if isinstance(target, ItemStack):
            kept = [t for t in self._tools if not t.matches(target)]
        elif isinstance(target, Material):
            kept = [
                t for t in self._tools
                if not (isinstance(t, MaterialTemplate) and t.material == target)
            ]
        else:
            raise ValueError(f"Cannot remove tools matching {target!r}")

        removed = len(self._tools) - len(kept)
        self._tools[:] = kept
        if removed:
            logger.debug(f"Removed {removed} template(s) matching {target} from {self._id}")
        return removed > 0

    def contains_tool(self, target: Union[ItemStack, Material]) -> bool:
        """
        Check whether a tool is part of this category.

        An item is checked against the name/lore templates only. A material is
        checked against the plain material templates only.
        """
        if isinstance(target, ItemStack):
            return any(
                isinstance(t, ItemStackTemplate) and t.matches(target)
                for t in self._tools
            )
        if isinstance(target, Material):
            item = ItemStack(target)
            return any(
                isinstance(t, MaterialTemplate) and t.matches(item)
                for t in self._tools
            )
        raise ValueError(f"Cannot check for tools matching {target!r}")

    def get_tools(self) -> list[ToolTemplate]:
        """Get a copy of the templates. Changes to it do not affect the category."""
        return list(self._tools)

    def iter_tools(self) -> Iterator[ToolTemplate]:
        """Iterate the templates in insertion order without copying them."""
        return iter(self._tools)

    def clear_tools(self) -> None:
        self._tools.clear()

    def __hash__(self) -> int:
        return hash(self._id)

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, ToolCategory):
            return NotImplemented
        return self._id == other._id

    def __repr__(self) -> str:
        return f"ToolCategory(id={self._id!r}, tools={len(self._tools)})"
