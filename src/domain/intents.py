# craft_planner/src/domain/intents.py
"""
Intents: requested state changes, one frozen dataclass per tag.

RecipeListIntent / ComponentListIntent group the variants each store accepts;
reducers consume them with ``match`` so a missing case shows up in type checks.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from src.domain.entities import Recipe


# ----------------------------
# Recipe list
# ----------------------------
@dataclass(frozen=True)
class AddRecipe:
    recipe: Recipe


@dataclass(frozen=True)
class RemoveRecipe:
    recipe_id: Any


@dataclass(frozen=True)
class ClearList:
    pass


@dataclass(frozen=True)
class UpdateQuantity:
    recipe_id: Any
    quantity: int


# ----------------------------
# Component list
# ----------------------------
@dataclass(frozen=True)
class SetComponents:
    components: Any  # normalized by the reducer; may be None or malformed


@dataclass(frozen=True)
class AddComponent:
    component: Any  # Component or mapping; a missing quantity defaults to 1


@dataclass(frozen=True)
class RemoveComponent:
    component_id: Any


@dataclass(frozen=True)
class UpdateComponentQuantity:
    component_id: Any
    quantity: float


@dataclass(frozen=True)
class ClearComponents:
    pass


RecipeListIntent = Union[AddRecipe, RemoveRecipe, ClearList, UpdateQuantity]
ComponentListIntent = Union[SetComponents, AddComponent, RemoveComponent, UpdateComponentQuantity, ClearComponents]
Intent = Union[RecipeListIntent, ComponentListIntent]

RECIPE_LIST_INTENTS = (AddRecipe, RemoveRecipe, ClearList, UpdateQuantity)
COMPONENT_LIST_INTENTS = (SetComponents, AddComponent, RemoveComponent, UpdateComponentQuantity, ClearComponents)


def intent_tag(intent: Any) -> str:
    """CamelCase class name -> snake_case tag, e.g. AddRecipe -> add_recipe."""
    name = type(intent).__name__
    out = []
    for i, ch in enumerate(name):
        if ch.isupper() and i:
            out.append("_")
        out.append(ch.lower())
    return "".join(out)
