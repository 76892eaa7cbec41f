# craft_planner/test/conftest.py
from __future__ import annotations

import pytest

from src.domain.entities import RawComponent, Recipe, RecipeComponent
from src.infrastructure.json_catalog import InMemoryCatalog


@pytest.fixture
def bread() -> Recipe:
    return Recipe(
        id=1,
        name="Bread",
        components=(RecipeComponent("Flour", 2), RecipeComponent("Water", 1)),
        type="intermediate_recipes",
    )


@pytest.fixture
def sword() -> Recipe:
    return Recipe(
        id=4,
        name="Iron Sword",
        components=(RecipeComponent("Iron Ingot", 3), RecipeComponent("Oak Log", 1)),
        type="crafted_items",
        extra={"artisanSkill": "Smithing"},
    )


@pytest.fixture
def catalog(bread: Recipe, sword: Recipe) -> InMemoryCatalog:
    recipes = [
        bread,
        Recipe(id=2, name="Flour", components=(RecipeComponent("Wheat", 3),), type="processing"),
        Recipe(id=3, name="Iron Ingot", components=(RecipeComponent("Iron Ore", 2), RecipeComponent("Coal", 1)), type="processing"),
        sword,
        Recipe(id=5, name="Travel Rations", components=(RecipeComponent("Bread", 2), RecipeComponent("Dried Berries", 4)), type="crafted_items"),
        # loops back on itself through Gear Shaft
        Recipe(id=6, name="Gear", components=(RecipeComponent("Gear Shaft", 1),), type="intermediate_recipes"),
        Recipe(id=7, name="Gear Shaft", components=(RecipeComponent("Gear", 1), RecipeComponent("Coal", 1)), type="processing"),
    ]
    raw = [
        RawComponent(id="wheat", name="Wheat", gathering_skill="Farming", gathering_level="Novice"),
        RawComponent(id="water", name="Water", gathering_skill="Gathering"),
        RawComponent(id="iron_ore", name="Iron Ore", gathering_skill="Mining"),
        RawComponent(id="coal", name="Coal", gathering_skill="Mining"),
        RawComponent(id="oak_log", name="Oak Log"),
    ]
    return InMemoryCatalog(recipes, raw)
