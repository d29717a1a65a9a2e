"""
Tests for ToolCategory.

Covers id validation, config overlay, template insertion and the three
removal and two containment forms.
"""

import pytest

from veinminer.models import AlgorithmConfig, BlockList, ItemStack, Material
from veinminer.tool import ItemStackTemplate, MaterialTemplate, ToolCategory


class TestCategoryConstruction:
    """Tests for creating categories."""

    @pytest.mark.parametrize("category_id", ["Pickaxe", "axe", "SHOVEL", "Tier2", "7", "a"])
    def test_valid_ids(self, defaults, category_id):
        category = ToolCategory(category_id, defaults)
        assert category.id == category_id

    @pytest.mark.parametrize(
        "category_id",
        [None, "", " ", "Pick axe", "Pick-axe", "pick_axe", "Pickaxe!", "Épée", "axe\n"],
    )
    def test_invalid_ids(self, defaults, category_id):
        with pytest.raises(ValueError):
            ToolCategory(category_id, defaults)

    def test_missing_defaults(self):
        with pytest.raises(ValueError):
            ToolCategory("Pickaxe", None)

    def test_none_blocklist_rejected(self, defaults):
        """Passing None explicitly is an error; omitting it gives an empty list."""
        with pytest.raises(ValueError):
            ToolCategory("Pickaxe", defaults, blocklist=None)

    def test_default_blocklist_is_empty(self, defaults):
        category = ToolCategory("Pickaxe", defaults)
        assert isinstance(category.blocklist, BlockList)
        assert len(category.blocklist) == 0

    def test_default_blocklists_are_not_shared(self, defaults):
        first = ToolCategory("Pickaxe", defaults)
        second = ToolCategory("Axe", defaults)
        first.blocklist.add(Material.STONE)
        assert Material.STONE not in second.blocklist

    def test_supplied_blocklist_is_kept(self, defaults):
        blocklist = BlockList([Material.COAL_ORE, Material.IRON_ORE])
        category = ToolCategory("Pickaxe", defaults, blocklist=blocklist)
        assert category.blocklist is blocklist

    def test_initial_templates_deduplicated(self, defaults):
        template = MaterialTemplate(Material.IRON_PICKAXE)
        category = ToolCategory("Pickaxe", defaults, template, template)
        assert category.get_tools() == [template]

    def test_invalid_initial_template(self, defaults):
        with pytest.raises(ValueError):
            ToolCategory("Pickaxe", defaults, Material.IRON_PICKAXE)


class TestCategoryConfig:
    """Tests for the category-owned algorithm config."""

    def test_inherits_defaults(self, defaults):
        category = ToolCategory("Pickaxe", defaults)
        assert category.config == defaults

    def test_owns_its_copy(self, defaults):
        """Changing the category config must not leak into the global one."""
        category = ToolCategory("Pickaxe", defaults)
        category.config.max_vein_size = 10
        category.config.disabled_worlds.add("world_the_end")

        assert defaults.max_vein_size == 32
        assert defaults.disabled_worlds == {"world_nether"}

    def test_category_settings_take_precedence(self, defaults):
        category = ToolCategory("Axe", defaults, settings={"MaxVeinSize": 128, "Cost": 2.5})
        assert category.config.max_vein_size == 128
        assert category.config.cost == 2.5
        # Undefined settings keep the global value
        assert category.config.disabled_worlds == {"world_nether"}
        assert category.config.include_edges is True

    def test_invalid_settings(self, defaults):
        with pytest.raises(ValueError):
            ToolCategory("Axe", defaults, settings={"MaxVeinSize": 0})


class TestAddTool:
    """Tests for add_tool."""

    def test_add_is_idempotent(self, defaults):
        category = ToolCategory("Axe", defaults)
        template = MaterialTemplate(Material.IRON_AXE)

        category.add_tool(template)
        size = len(category.get_tools())
        category.add_tool(template)

        assert len(category.get_tools()) == size == 1

    def test_equal_templates_are_duplicates(self, defaults):
        """Re-adding an equivalent rule is a no-op, not just the same object."""
        category = ToolCategory("Axe", defaults)
        category.add_tool(ItemStackTemplate(Material.IRON_AXE, "Chopper", ["Sharp"]))
        category.add_tool(ItemStackTemplate(Material.IRON_AXE, "Chopper", ("Sharp",)))
        assert len(category.get_tools()) == 1

    def test_preserves_insertion_order(self, defaults):
        category = ToolCategory("Axe", defaults)
        templates = [
            MaterialTemplate(Material.STONE_AXE),
            ItemStackTemplate(Material.IRON_AXE, "Chopper"),
            MaterialTemplate(Material.IRON_AXE),
        ]
        for template in templates:
            category.add_tool(template)
        assert category.get_tools() == templates
        assert list(category.iter_tools()) == templates

    def test_rejects_invalid_template(self, defaults):
        category = ToolCategory("Axe", defaults)
        with pytest.raises(ValueError):
            category.add_tool(None)


class TestRemoveTool:
    """Tests for the three forms of remove_tool."""

    def test_remove_exact_template(self, pickaxe):
        assert pickaxe.remove_tool(MaterialTemplate(Material.IRON_PICKAXE)) is True
        assert pickaxe.get_tools() == [MaterialTemplate(Material.DIAMOND_PICKAXE)]

    def test_remove_missing_template(self, pickaxe):
        assert pickaxe.remove_tool(MaterialTemplate(Material.GOLDEN_PICKAXE)) is False
        assert len(pickaxe.get_tools()) == 2

    def test_remove_by_material_keeps_decorated(self, pickaxe, excalibur_template, excalibur):
        """Material removal only drops plain material templates."""
        pickaxe.add_tool(excalibur_template)

        assert pickaxe.remove_tool(Material.DIAMOND_PICKAXE) is True

        assert pickaxe.get_tools() == [
            MaterialTemplate(Material.IRON_PICKAXE),
            excalibur_template,
        ]
        assert pickaxe.contains_tool(excalibur)
        assert not pickaxe.contains_tool(Material.DIAMOND_PICKAXE)

    def test_remove_by_material_only_decorated(self, defaults, excalibur_template):
        category = ToolCategory("Pickaxe", defaults, excalibur_template)
        assert category.remove_tool(Material.DIAMOND_PICKAXE) is False
        assert category.get_tools() == [excalibur_template]

    def test_remove_by_item_is_broad(self, pickaxe, excalibur_template, excalibur):
        """Item removal drops every template matching the item, named or not."""
        pickaxe.add_tool(excalibur_template)

        assert pickaxe.remove_tool(excalibur) is True

        assert pickaxe.get_tools() == [MaterialTemplate(Material.IRON_PICKAXE)]

    def test_remove_by_item_no_match(self, pickaxe):
        assert pickaxe.remove_tool(ItemStack(Material.SHEARS)) is False
        assert len(pickaxe.get_tools()) == 2

    def test_remove_invalid_target(self, pickaxe):
        with pytest.raises(ValueError):
            pickaxe.remove_tool("diamond_pickaxe")


class TestContainsTool:
    """Tests for the two forms of contains_tool."""

    def test_material_template_only(self, defaults):
        category = ToolCategory("Axe", defaults, MaterialTemplate(Material.IRON_AXE))
        decorated = ItemStack(Material.IRON_AXE, display_name="Chopper")

        assert category.contains_tool(Material.IRON_AXE)
        assert not category.contains_tool(decorated)

    def test_item_check_with_matching_item_template(self, defaults):
        category = ToolCategory(
            "Axe",
            defaults,
            MaterialTemplate(Material.IRON_AXE),
            ItemStackTemplate(Material.IRON_AXE, display_name="Chopper"),
        )
        assert category.contains_tool(ItemStack(Material.IRON_AXE, display_name="Chopper"))

    def test_material_check_ignores_item_templates(self, defaults, excalibur_template):
        category = ToolCategory("Pickaxe", defaults, excalibur_template)
        assert not category.contains_tool(Material.DIAMOND_PICKAXE)

    def test_plain_item_not_contained(self, pickaxe):
        """A plain item only matches material templates, which the item check skips."""
        assert not pickaxe.contains_tool(ItemStack(Material.IRON_PICKAXE))

    def test_air_is_never_contained(self, pickaxe):
        assert not pickaxe.contains_tool(Material.AIR)

    def test_invalid_target(self, pickaxe):
        with pytest.raises(ValueError):
            pickaxe.contains_tool(None)


class TestToolsCollection:
    """Tests for get_tools, iter_tools and clear_tools."""

    def test_get_tools_returns_copy(self, pickaxe):
        tools = pickaxe.get_tools()
        tools.clear()
        tools.append(MaterialTemplate(Material.SHEARS))

        assert pickaxe.get_tools() == [
            MaterialTemplate(Material.IRON_PICKAXE),
            MaterialTemplate(Material.DIAMOND_PICKAXE),
        ]

    def test_clear_tools(self, pickaxe):
        pickaxe.clear_tools()
        assert pickaxe.get_tools() == []
        assert not pickaxe.contains_tool(Material.IRON_PICKAXE)


class TestCategoryEquality:
    """Tests for equality and hashing."""

    def test_equal_by_id(self, defaults):
        first = ToolCategory("Pickaxe", defaults, MaterialTemplate(Material.IRON_PICKAXE))
        second = ToolCategory("Pickaxe", AlgorithmConfig())
        assert first == second
        assert hash(first) == hash(second)
        assert len({first, second}) == 1

    def test_case_sensitive(self, defaults):
        assert ToolCategory("Pickaxe", defaults) != ToolCategory("pickaxe", defaults)

    def test_not_equal_to_other_types(self, defaults):
        assert ToolCategory("Pickaxe", defaults) != "Pickaxe"
