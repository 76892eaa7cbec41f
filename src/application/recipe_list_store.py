# craft_planner/src/application/recipe_list_store.py
from __future__ import annotations

from typing import Any, Tuple, assert_never

from src.domain.entities import Recipe, RecipeListEntry, RecipeListState
from src.domain.intents import AddRecipe, ClearList, RecipeListIntent, RemoveRecipe, UpdateQuantity

INITIAL_RECIPE_LIST = RecipeListState()


def _has_recipe(entries: Tuple[RecipeListEntry, ...], recipe_id: Any) -> bool:
    return any(e.recipe.id == recipe_id for e in entries)


def _with_entries(entries: Tuple[RecipeListEntry, ...]) -> RecipeListState:
    return RecipeListState(recipes=entries, count=len(entries))


def add_recipe(state: RecipeListState, recipe: Recipe) -> RecipeListState:
    if _has_recipe(state.recipes, recipe.id):
        # same object back: callers detect "nothing happened" with `is`
        return state
    return _with_entries(state.recipes + (RecipeListEntry(recipe=recipe, quantity=1),))


def remove_recipe(state: RecipeListState, recipe_id: Any) -> RecipeListState:
    if not _has_recipe(state.recipes, recipe_id):
        return state
    return _with_entries(tuple(e for e in state.recipes if e.recipe.id != recipe_id))


def clear_list(state: RecipeListState) -> RecipeListState:
    return _with_entries(())


def update_quantity(state: RecipeListState, recipe_id: Any, quantity: int) -> RecipeListState:
    if not _has_recipe(state.recipes, recipe_id):
        return state
    entries = tuple(
        RecipeListEntry(recipe=e.recipe, quantity=max(1, quantity)) if e.recipe.id == recipe_id else e
        for e in state.recipes
    )
    # structural size unchanged: count carried over as-is
    return RecipeListState(recipes=entries, count=state.count)


def reduce_recipe_list(state: RecipeListState, intent: RecipeListIntent) -> RecipeListState:
    """Pure transition for the selected-recipe list. Never raises on unknown ids."""
    match intent:
        case AddRecipe(recipe=recipe):
            return add_recipe(state, recipe)
        case RemoveRecipe(recipe_id=recipe_id):
            return remove_recipe(state, recipe_id)
        case ClearList():
            return clear_list(state)
        case UpdateQuantity(recipe_id=recipe_id, quantity=quantity):
            return update_quantity(state, recipe_id, quantity)
        case _:
            assert_never(intent)
