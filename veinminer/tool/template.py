"""
Tool templates.

A template is a single rule deciding whether an item belongs to a tool
category. There are exactly two kinds: a material-only rule and a rule that
also requires the item's display name and/or lore.
"""

from dataclasses import dataclass
from typing import Optional, Union

from ..models.item import ItemStack, Material, check_decoration, is_empty


def _require_material(material: object) -> None:
    if not isinstance(material, Material):
        raise ValueError(f"Template material must be a Material, got {material!r}")


@dataclass(frozen=True)
class MaterialTemplate:
    """Matches any item of the given material, regardless of name or lore."""

    material: Material

    def __post_init__(self) -> None:
        _require_material(self.material)

    def matches(self, item: Optional[ItemStack]) -> bool:
        return not is_empty(item) and item.material == self.material


@dataclass(frozen=True)
class ItemStackTemplate:
    """
    Matches items of the given material whose name and lore equal the template's.

    Fields left as None are not checked. Comparison is exact and case-sensitive.
    Empty lore is stored as None, so a template with no lore and one with an
    empty lore list are the same rule.
    """

    material: Material
    display_name: Optional[str] = None
    lore: Optional[tuple[str, ...]] = None

    def __post_init__(self) -> None:
        _require_material(self.material)
        # Frozen dataclass, so normalise through object.__setattr__
        lore = check_decoration(self.display_name, self.lore) or None
        object.__setattr__(self, "lore", lore)

    def matches(self, item: Optional[ItemStack]) -> bool:
        if is_empty(item) or item.material != self.material:
            return False
        if self.display_name is not None and item.display_name != self.display_name:
            return False
        if self.lore is not None and tuple(item.lore or ()) != self.lore:
            return False
        return True


ToolTemplate = Union[MaterialTemplate, ItemStackTemplate]

TEMPLATE_TYPES = (MaterialTemplate, ItemStackTemplate)


def is_template(value: object) -> bool:
    """Check whether a value is one of the tool template kinds."""
    return isinstance(value, TEMPLATE_TYPES)


def template_for(item: ItemStack) -> ToolTemplate:
    """
    Build the template that describes an item.

    An undecorated item yields a MaterialTemplate; an item with a display name
    or lore yields an ItemStackTemplate that requires both.

    Raises:
        ValueError: If the item is empty
    """
    if is_empty(item):
        raise ValueError("Cannot build a template from an empty item")
    if not item.is_decorated:
        return MaterialTemplate(item.material)
    return ItemStackTemplate(item.material, item.display_name, item.lore)
