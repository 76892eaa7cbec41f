# craft_planner/test/test_component_calculator.py
from __future__ import annotations

import logging

from src.application.component_calculator import ComponentCalculator, consolidate_by_id
from src.application.recipe_list_store import INITIAL_RECIPE_LIST, reduce_recipe_list
from src.domain.entities import Component, Recipe
from src.domain.intents import AddRecipe, UpdateQuantity


def _by_id(components):
    return {c.id: c.quantity for c in components}


def test_raw_component_resolves_directly(catalog):
    out = ComponentCalculator(catalog).break_down("Wheat", 5)
    assert len(out) == 1
    assert out[0].id == "wheat"
    assert out[0].quantity == 5
    assert out[0].is_raw is True
    assert out[0].gathering_skill == "Farming"


def test_processing_recipe_multiplies_down(catalog):
    out = ComponentCalculator(catalog).break_down("Iron Ingot", 3)
    assert _by_id(out) == {"iron_ore": 6, "coal": 3}


def test_unknown_component(catalog):
    out = ComponentCalculator(catalog).break_down("Dried Berries", 4)
    assert out[0].id == "unknown_Dried Berries"
    assert out[0].is_unknown is True
    assert out[0].quantity == 4


def test_cycle_contributes_nothing(catalog, caplog):
    with caplog.at_level(logging.WARNING, logger="app.component_calculator"):
        out = ComponentCalculator(catalog).break_down("Gear", 1)
    # Gear -> Gear Shaft -> (Gear: cycle, Coal)
    assert _by_id(out) == {"coal": 1}
    assert any("Circular dependency" in r.getMessage() for r in caplog.records)


def test_calculate_scales_by_entry_quantity_and_consolidates(catalog, bread, sword):
    rations = catalog.recipe_by_id(5)
    s = INITIAL_RECIPE_LIST
    for intent in (AddRecipe(bread), AddRecipe(sword), AddRecipe(rations), UpdateQuantity(4, 2)):
        s = reduce_recipe_list(s, intent)

    out = ComponentCalculator(catalog).calculate(s)
    # bread x1: wheat 6, water 1; rations x1: 2 bread -> wheat 12, water 2, berries 4
    # sword x2: 6 ingots -> ore 12, coal 6; oak 2
    assert _by_id(out) == {
        "wheat": 18,
        "water": 3,
        "iron_ore": 12,
        "coal": 6,
        "oak_log": 2,
        "unknown_Dried Berries": 4,
    }
    assert [c.id for c in out][:2] == ["wheat", "water"]


def test_calculate_empty_or_without_components(catalog):
    calc = ComponentCalculator(catalog)
    assert calc.calculate(INITIAL_RECIPE_LIST) == []
    s = reduce_recipe_list(INITIAL_RECIPE_LIST, AddRecipe(Recipe(id=99, name="Mystery")))
    assert calc.calculate(s) == []


def test_consolidate_by_id():
    out = consolidate_by_id([
        Component(id="a", name="A", quantity=1),
        Component(id="b", name="B", quantity=2),
        Component(id="a", name="A", quantity=3),
    ])
    assert [(c.id, c.quantity) for c in out] == [("a", 4), ("b", 2)]


def test_cost_breakdown():
    comps = [
        Component(id="ore", name="Iron Ore", quantity=4, gathering_skill="Mining"),
        Component(id="coal", name="Coal", quantity=2, gathering_skill="Mining"),
        Component(id="log", name="Oak Log", quantity=1),
    ]
    out = ComponentCalculator.cost_breakdown(comps)
    assert out["total_unique_components"] == 3
    assert out["total_items"] == 7
    assert out["skills_required"] == ["Mining", "unknown"]
    assert out["breakdown"]["Mining"]["total_items"] == 6
    assert len(out["breakdown"]["unknown"]["components"]) == 1


def test_digit_names_are_not_recipe_ids(catalog):
    # "2" is Flour's id, but components are referenced by name only
    out = ComponentCalculator(catalog).break_down("2", 1)
    assert len(out) == 1
    assert out[0].id == "unknown_2"
    assert out[0].is_unknown is True


def test_gathering_order_sorts_by_efficiency():
    comps = [
        Component(id="wheat", name="Wheat", quantity=6, gathering_skill="Farming"),
        Component(id="ore", name="Iron Ore", quantity=4, gathering_skill="Mining"),
        Component(id="coal", name="Coal", quantity=2, gathering_skill="Mining"),
        Component(id="log", name="Oak Log", quantity=1),
    ]
    out = ComponentCalculator.gathering_order(comps, {"Mining": 3, "Farming": 0.5})
    assert [g["skill"] for g in out] == ["Mining", "unknown", "Farming"]
    assert out[0]["total_quantity"] == 6
    assert [c["id"] for c in out[0]["components"]] == ["ore", "coal"]
    assert out[1]["efficiency"] == 1


def test_gathering_order_without_ratings_keeps_first_seen_order():
    comps = [
        Component(id="log", name="Oak Log", quantity=1),
        Component(id="ore", name="Iron Ore", quantity=4, gathering_skill="Mining"),
    ]
    assert [g["skill"] for g in ComponentCalculator.gathering_order(comps)] == ["unknown", "Mining"]


def test_recipe_dependencies(catalog, bread, sword):
    s = INITIAL_RECIPE_LIST
    for intent in (AddRecipe(bread), AddRecipe(sword), AddRecipe(Recipe(id=99, name="Mystery"))):
        s = reduce_recipe_list(s, intent)

    deps = ComponentCalculator(catalog).recipe_dependencies(s)
    # raw components (Water, Oak Log) are not dependencies; Mystery has no components
    assert deps == {
        1: [{"id": 2, "name": "Flour", "quantity": 2}],
        4: [{"id": 3, "name": "Iron Ingot", "quantity": 3}],
    }
