"""
Block list for VeinMiner.

The set of blocks a tool category is allowed to vein mine.
"""

from typing import Iterable, Iterator

from .item import Material


class BlockList:
    """Insertion-ordered set of materials."""

    def __init__(self, materials: Iterable[Material] = ()) -> None:
        self._materials: dict[Material, None] = {}
        self.add_all(materials)

    @classmethod
    def from_names(cls, names: Iterable[str]) -> "BlockList":
        """Build a block list from material names (see Material.from_name)."""
        return cls(Material.from_name(name) for name in names)

    def add(self, material: Material) -> bool:
        """Add a material. Returns False if it was already present."""
        if not isinstance(material, Material):
            raise ValueError(f"Block list entries must be materials, got {material!r}")
        if material in self._materials:
            return False
        self._materials[material] = None
        return True

    def add_all(self, materials: Iterable[Material]) -> None:
        for material in materials:
            self.add(material)

    def remove(self, material: Material) -> bool:
        """Remove a material. Returns False if it was not present."""
        return self._materials.pop(material, False) is None

    def contains(self, material: Material) -> bool:
        return material in self._materials

    def clear(self) -> None:
        self._materials.clear()

    def copy(self) -> "BlockList":
        return BlockList(self._materials)

    def __contains__(self, material: object) -> bool:
        return material in self._materials

    def __iter__(self) -> Iterator[Material]:
        return iter(list(self._materials))

    def __len__(self) -> int:
        return len(self._materials)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BlockList):
            return NotImplemented
        return list(self._materials) == list(other._materials)

    def __repr__(self) -> str:
        names = ", ".join(material.value for material in self._materials)
        return f"BlockList([{names}])"
