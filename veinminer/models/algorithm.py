"""
Algorithm configuration for VeinMiner.

Holds the tunable traversal parameters. A global instance supplies the
defaults; every tool category owns a copy that its own settings may override.
"""

import math
from dataclasses import dataclass, field, replace
from typing import Any, Mapping

DEFAULT_MAX_VEIN_SIZE = 64

# Config file keys -> attribute names
_KEY_ALIASES = {
    "RepairFriendly": "repair_friendly",
    "RepairFriendlyVeinminer": "repair_friendly",
    "IncludeEdges": "include_edges",
    "MaxVeinSize": "max_vein_size",
    "Cost": "cost",
    "DisabledWorlds": "disabled_worlds",
}


def _parse_bool(key: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.lower() in ("true", "false"):
        return value.lower() == "true"
    raise ValueError(f"'{key}' must be a boolean, got {value!r}")


def _parse_vein_size(key: str, value: Any) -> int:
    # Strings come from env interpolation and must hold a whole number
    if isinstance(value, bool):
        raise ValueError(f"'{key}' must be an integer, got {value!r}")
    if isinstance(value, int):
        size = value
    elif isinstance(value, float) and value.is_integer():
        size = int(value)
    elif isinstance(value, str) and value.strip().lstrip("+-").isdigit():
        size = int(value)
    else:
        raise ValueError(f"'{key}' must be an integer, got {value!r}")
    if size < 1:
        raise ValueError(f"'{key}' must be at least 1, got {value!r}")
    return size


def _parse_cost(key: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise ValueError(f"'{key}' must be a number, got {value!r}")
    try:
        cost = float(value)
    except ValueError as e:
        raise ValueError(f"'{key}' must be a number, got {value!r}") from e
    if not math.isfinite(cost):
        raise ValueError(f"'{key}' must be a finite number, got {value!r}")
    if cost < 0:
        raise ValueError(f"'{key}' must not be negative, got {value!r}")
    return cost


def _parse_worlds(key: str, value: Any) -> set[str]:
    if not isinstance(value, (list, tuple, set)):
        raise ValueError(f"'{key}' must be a list of world names")
    for world in value:
        if not isinstance(world, str):
            raise ValueError(f"'{key}' entries must be world names, got {world!r}")
    return set(value)


@dataclass
class AlgorithmConfig:
    """Tunable parameters for the vein mining traversal."""

    repair_friendly: bool = False
    include_edges: bool = True
    max_vein_size: int = DEFAULT_MAX_VEIN_SIZE
    cost: float = 0.0
    disabled_worlds: set[str] = field(default_factory=set)

    def __post_init__(self) -> None:
        if self.max_vein_size < 1:
            raise ValueError("max_vein_size must be at least 1")
        if not math.isfinite(self.cost) or self.cost < 0:
            raise ValueError("cost must be a finite, non-negative number")
        self.disabled_worlds = set(self.disabled_worlds)

    def copy(self) -> "AlgorithmConfig":
        """Return an independent copy of this configuration."""
        return replace(self, disabled_worlds=set(self.disabled_worlds))

    def read_from(self, data: Mapping[str, Any]) -> "AlgorithmConfig":
        """
        Overlay values from a mapping onto this configuration.

        Only keys present in the mapping are changed, so values that are not
        defined keep whatever this configuration inherited. Both snake_case
        attribute names and the PascalCase keys of the config file are accepted.
        Unknown keys are ignored.

        Args:
            data: Mapping of setting names to values

        Returns:
            This configuration, for chaining

        Raises:
            ValueError: If a value is of the wrong type or out of range
        """
        values: dict[str, Any] = {}
        for raw_key, value in data.items():
            key = _KEY_ALIASES.get(raw_key, raw_key)
            if key == "repair_friendly" or key == "include_edges":
                values[key] = _parse_bool(raw_key, value)
            elif key == "max_vein_size":
                values[key] = _parse_vein_size(raw_key, value)
            elif key == "cost":
                values[key] = _parse_cost(raw_key, value)
            elif key == "disabled_worlds":
                values[key] = _parse_worlds(raw_key, value)

        # Apply only once everything validated
        for key, value in values.items():
            setattr(self, key, value)
        return self

    def is_disabled_world(self, world: str) -> bool:
        """Check whether vein mining is disabled in a world."""
        return world in self.disabled_worlds
