"""
Item models for VeinMiner.

Defines the materials and item stacks that tool templates are matched against.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional

NAMESPACE_PREFIX = "minecraft:"


class Material(Enum):
    """Block and item kinds recognised by tool categories and block lists."""

    AIR = "air"
    CAVE_AIR = "cave_air"
    VOID_AIR = "void_air"

    # Ores and stone
    STONE = "stone"
    COAL_ORE = "coal_ore"
    IRON_ORE = "iron_ore"
    COPPER_ORE = "copper_ore"
    GOLD_ORE = "gold_ore"
    REDSTONE_ORE = "redstone_ore"
    LAPIS_ORE = "lapis_ore"
    DIAMOND_ORE = "diamond_ore"
    EMERALD_ORE = "emerald_ore"
    NETHER_QUARTZ_ORE = "nether_quartz_ore"
    ANCIENT_DEBRIS = "ancient_debris"
    GLOWSTONE = "glowstone"

    # Soil and plants
    DIRT = "dirt"
    GRAVEL = "gravel"
    SAND = "sand"
    CLAY = "clay"
    OAK_LOG = "oak_log"
    BIRCH_LOG = "birch_log"
    SPRUCE_LOG = "spruce_log"
    JUNGLE_LOG = "jungle_log"
    OAK_LEAVES = "oak_leaves"
    MELON = "melon"
    PUMPKIN = "pumpkin"

    # Tools
    WOODEN_PICKAXE = "wooden_pickaxe"
    STONE_PICKAXE = "stone_pickaxe"
    IRON_PICKAXE = "iron_pickaxe"
    GOLDEN_PICKAXE = "golden_pickaxe"
    DIAMOND_PICKAXE = "diamond_pickaxe"
    NETHERITE_PICKAXE = "netherite_pickaxe"
    WOODEN_AXE = "wooden_axe"
    STONE_AXE = "stone_axe"
    IRON_AXE = "iron_axe"
    GOLDEN_AXE = "golden_axe"
    DIAMOND_AXE = "diamond_axe"
    NETHERITE_AXE = "netherite_axe"
    WOODEN_SHOVEL = "wooden_shovel"
    STONE_SHOVEL = "stone_shovel"
    IRON_SHOVEL = "iron_shovel"
    GOLDEN_SHOVEL = "golden_shovel"
    DIAMOND_SHOVEL = "diamond_shovel"
    NETHERITE_SHOVEL = "netherite_shovel"
    WOODEN_HOE = "wooden_hoe"
    STONE_HOE = "stone_hoe"
    IRON_HOE = "iron_hoe"
    GOLDEN_HOE = "golden_hoe"
    DIAMOND_HOE = "diamond_hoe"
    NETHERITE_HOE = "netherite_hoe"
    SHEARS = "shears"

    # Misc items
    STICK = "stick"
    BOOK = "book"

    @classmethod
    def from_name(cls, name: str) -> "Material":
        """
        Look up a material by its name.

        Accepts enum names or namespaced keys in any letter case, e.g.
        "DIAMOND_PICKAXE", "diamond_pickaxe" or "minecraft:diamond_pickaxe".

        Raises:
            ValueError: If the name does not identify a known material
        """
        if not isinstance(name, str) or not name.strip():
            raise ValueError(f"Invalid material name: {name!r}")

        key = name.strip().lower()
        if key.startswith(NAMESPACE_PREFIX):
            key = key[len(NAMESPACE_PREFIX):]

        try:
            return cls(key)
        except ValueError:
            raise ValueError(f"Unknown material: {name}") from None

    @property
    def key(self) -> str:
        """Namespaced key of this material."""
        return f"{NAMESPACE_PREFIX}{self.value}"

    @property
    def is_air(self) -> bool:
        return self in _AIR_MATERIALS


_AIR_MATERIALS = frozenset({Material.AIR, Material.CAVE_AIR, Material.VOID_AIR})


@dataclass
class ItemStack:
    """An item held by a player: a material plus optional name and lore."""

    material: Material
    amount: int = 1
    display_name: Optional[str] = None
    lore: Optional[tuple[str, ...]] = field(default=None)

    def __post_init__(self) -> None:
        if not isinstance(self.material, Material):
            raise ValueError(f"Item material must be a Material, got {self.material!r}")
        self.lore = check_decoration(self.display_name, self.lore)

    @property
    def is_decorated(self) -> bool:
        """Whether the item carries a display name or lore."""
        return self.display_name is not None or bool(self.lore)


def check_decoration(
    display_name: Optional[str], lore: Optional[Iterable[str]]
) -> Optional[tuple[str, ...]]:
    """
    Validate an item name and lore.

    Returns:
        The lore as a tuple, or None if no lore was given

    Raises:
        ValueError: If the name is not a string or the lore is not a sequence of strings
    """
    if display_name is not None and not isinstance(display_name, str):
        raise ValueError(f"Display name must be a string, got {display_name!r}")
    if lore is None:
        return None
    # A bare string would otherwise be split into one line per character
    if isinstance(lore, str):
        raise ValueError(f"Lore must be a list of lines, got the string {lore!r}")
    lines = tuple(lore)
    for line in lines:
        if not isinstance(line, str):
            raise ValueError(f"Lore lines must be strings, got {line!r}")
    return lines


def is_empty(item: Optional[ItemStack]) -> bool:
    """
    Check whether an item is effectively absent.

    An empty hand is represented by None, an air item or a stack of zero items.
    """
    return item is None or item.material.is_air or item.amount <= 0
