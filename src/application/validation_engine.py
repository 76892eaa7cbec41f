# craft_planner/src/application/validation_engine.py
from __future__ import annotations

from typing import Optional

from src.application import response_templates as rt
from src.application.memo import memoize_last
from src.domain.entities import Recipe, RecipeListState, ValidationResult


def _matches(entry_recipe: Recipe, selected: Recipe) -> bool:
    # name is a fallback for records without a populated id; keep the OR
    return entry_recipe.id == selected.id or entry_recipe.name == selected.name


@memoize_last
def _validate(selected_recipe: Optional[Recipe], recipe_list: RecipeListState) -> ValidationResult:
    has_selection = selected_recipe is not None
    is_already_selected = has_selection and any(
        _matches(e.recipe, selected_recipe) for e in recipe_list.recipes
    )
    if not has_selection:
        message = rt.SELECT_RECIPE
    elif is_already_selected:
        message = rt.ALREADY_IN_LIST
    else:
        message = rt.READY_TO_ADD

    return ValidationResult(
        has_selection=has_selection,
        is_already_selected=is_already_selected,
        can_add_selected=has_selection and not is_already_selected,
        can_clear_list=len(recipe_list.recipes) > 0,
        validation_message=message,
    )


def validate_selection(selected_recipe: Optional[Recipe], recipe_list: RecipeListState) -> ValidationResult:
    """Can the selected recipe be added to the list, and what should the UI say about it."""
    return _validate(selected_recipe, recipe_list)
