# craft_planner/test/test_planner_service.py
from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor

import pytest

from src.application.planner_service import PlannerService
from src.domain.entities import Component, Recipe
from src.domain.intents import AddComponent, AddRecipe, ClearList, RemoveRecipe, UpdateQuantity
from src.infrastructure.json_catalog import InMemoryCatalog
from src.infrastructure.session_store import InMemorySessionStore


@pytest.fixture
def service(catalog) -> PlannerService:
    return PlannerService(sessions=InMemorySessionStore(ttl_seconds=60), catalog=catalog)


def test_fresh_session_view(service):
    out = service.view("s1")
    assert out["recipe_list"] == {"recipes": [], "count": 0}
    assert out["component_list"] == {"components": [], "is_calculating": False}
    assert out["validation"]["validation_message"] == "Select a recipe to add"
    assert out["status"] == {"type": "info", "message": "7 recipes available", "priority": 3}


def test_add_recipe_recalculates_components(service, bread):
    out = service.dispatch("s1", AddRecipe(bread))
    assert out["changed"] is True
    assert out["recipe_list"]["count"] == 1
    comps = {c["id"]: c["quantity"] for c in out["component_list"]["components"]}
    assert comps == {"wheat": 6, "water": 1}
    assert out["status"]["message"] == "1 recipe in your list"


def test_quantity_update_rescales_components(service, bread):
    service.dispatch("s1", AddRecipe(bread))
    out = service.dispatch("s1", UpdateQuantity(1, 3))
    comps = {c["id"]: c["quantity"] for c in out["component_list"]["components"]}
    assert comps == {"wheat": 18, "water": 3}


def test_noop_reports_unchanged(service, bread):
    service.dispatch("s1", AddRecipe(bread))
    out = service.dispatch("s1", RemoveRecipe(12345))
    assert out["changed"] is False
    assert out["recipe_list"]["count"] == 1


def test_clear_list_empties_components(service, bread):
    service.dispatch("s1", AddRecipe(bread))
    out = service.dispatch("s1", ClearList())
    assert out["component_list"]["components"] == []


def test_component_intents_do_not_recalculate(service, bread):
    service.dispatch("s1", AddRecipe(bread))
    out = service.dispatch("s1", AddComponent(Component(id="torch", name="Torch", quantity=None)))
    ids = [c["id"] for c in out["component_list"]["components"]]
    assert ids == ["wheat", "water", "torch"]


def test_sessions_are_isolated(service, bread):
    service.dispatch("a", AddRecipe(bread))
    assert service.view("b")["recipe_list"]["count"] == 0


def test_select_and_validate(service, bread):
    out = service.select("s1", 1)
    assert out["selected_recipe"]["name"] == "Bread"
    assert out["validation"]["can_add_selected"] is True
    assert out["status"]["message"] == "Selected: Bread"

    out = service.dispatch("s1", AddRecipe(bread))
    assert out["validation"]["is_already_selected"] is True
    assert out["validation"]["validation_message"] == "Recipe already in list"

    out = service.select("s1", None)
    assert out["selected_recipe"] is None


def test_select_unknown_raises_lookup_error(service):
    with pytest.raises(LookupError):
        service.select("s1", 999)


def test_progress(service, bread):
    service.dispatch("s1", AddRecipe(bread))
    out = service.progress("s1", {"wheat": 6})
    assert out["completed_components"] == 1
    assert out["total_components"] == 2


def test_trace_intents_logs_at_debug(catalog, bread, caplog):
    service = PlannerService(InMemorySessionStore(), catalog, trace_intents=True)
    with caplog.at_level(logging.DEBUG, logger="app.planner_service"):
        service.dispatch("s1", AddRecipe(bread))
    debug = [r.getMessage() for r in caplog.records if r.levelno == logging.DEBUG]
    assert any("intent add_recipe" in m for m in debug)
    assert any("intent set_components" in m for m in debug)


def test_session_store_expires():
    store = InMemorySessionStore(ttl_seconds=10)
    st = store.get_or_create("old")
    st.updated_at -= 100
    store.get_or_create("new")
    assert len(store) == 1


def test_allowed_types_drive_available_count(catalog):
    service = PlannerService(InMemorySessionStore(), catalog, allowed_types=("intermediate_recipes", "crafted_items"))
    out = service.view("s1")
    assert [r.name for r in service.available_recipes()] == ["Bread", "Iron Sword", "Travel Rations", "Gear"]
    assert out["status"]["message"] == "4 recipes available"
    assert out["stats"]["total_recipes"] == 4


def test_view_carries_gathering_order_and_dependencies(service, bread):
    out = service.dispatch("s1", AddRecipe(bread))
    assert [g["skill"] for g in out["gathering_order"]] == ["Farming", "Gathering"]
    assert out["dependencies"] == {"1": [{"id": 2, "name": "Flour", "quantity": 2}]}


def test_concurrent_dispatch_keeps_every_intent():
    recipes = [Recipe(id=i, name=f"Recipe {i}") for i in range(200)]
    service = PlannerService(InMemorySessionStore(), InMemoryCatalog(recipes, []))

    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(lambda r: service.dispatch("s", AddRecipe(r)), recipes))

    out = service.view("s")
    assert out["recipe_list"]["count"] == 200
    assert {e["recipe"]["id"] for e in out["recipe_list"]["recipes"]} == set(range(200))
