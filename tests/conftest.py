"""
Pytest configuration and fixtures for VeinMiner tests.
"""

import pytest

from veinminer.config_loader import reset_config_cache
from veinminer.models import AlgorithmConfig, ItemStack, Material
from veinminer.tool import (
    ItemStackTemplate,
    MaterialTemplate,
    ToolCategory,
    create_registry,
)


@pytest.fixture
def defaults():
    """Global algorithm config used to seed categories."""
    return AlgorithmConfig(max_vein_size=32, disabled_worlds={"world_nether"})


@pytest.fixture
def registry(defaults):
    """A fresh registry holding only the hand category."""
    return create_registry(defaults)


@pytest.fixture
def pickaxe(defaults):
    """A pickaxe category with plain iron and diamond pickaxes."""
    return ToolCategory(
        "Pickaxe",
        defaults,
        MaterialTemplate(Material.IRON_PICKAXE),
        MaterialTemplate(Material.DIAMOND_PICKAXE),
    )


@pytest.fixture
def excalibur_template():
    """A named diamond pickaxe rule."""
    return ItemStackTemplate(Material.DIAMOND_PICKAXE, display_name="Excalibur")


@pytest.fixture
def excalibur():
    """A diamond pickaxe named Excalibur."""
    return ItemStack(Material.DIAMOND_PICKAXE, display_name="Excalibur")


@pytest.fixture(autouse=True)
def reset_app_config():
    """Reset the cached app config around each test."""
    reset_config_cache()
    yield
    reset_config_cache()
