# craft_planner/src/application/app_state.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from src.application.component_list_store import INITIAL_COMPONENT_LIST, reduce_component_list
from src.application.recipe_list_store import INITIAL_RECIPE_LIST, reduce_recipe_list
from src.domain.entities import ComponentListState, RecipeListState
from src.domain.intents import COMPONENT_LIST_INTENTS, RECIPE_LIST_INTENTS


@dataclass(frozen=True)
class AppState:
    recipe_list: RecipeListState = INITIAL_RECIPE_LIST
    component_list: ComponentListState = INITIAL_COMPONENT_LIST


def initial_app_state() -> AppState:
    return AppState()


def reduce_app(state: AppState, intent: Any) -> AppState:
    """
    Route an intent to the store that owns it. The two stores never see each
    other's intents; an unchanged sub-snapshot yields the same AppState object.
    """
    if isinstance(intent, RECIPE_LIST_INTENTS):
        recipe_list = reduce_recipe_list(state.recipe_list, intent)
        if recipe_list is state.recipe_list:
            return state
        return AppState(recipe_list=recipe_list, component_list=state.component_list)

    if isinstance(intent, COMPONENT_LIST_INTENTS):
        component_list = reduce_component_list(state.component_list, intent)
        if component_list is state.component_list:
            return state
        return AppState(recipe_list=state.recipe_list, component_list=component_list)

    return state
