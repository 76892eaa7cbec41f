# craft_planner/src/application/status_engine.py
from __future__ import annotations

from typing import Optional

from src.application import response_templates as rt
from src.application.memo import memoize_last
from src.domain.entities import Recipe, StatusResult


@memoize_last
def _status(recipe_count: int, selected_recipe: Optional[Recipe], recipe_list_count: int) -> StatusResult:
    if recipe_list_count > 0:
        return StatusResult(rt.STATUS_SUCCESS, rt.in_list_reply(recipe_list_count), 1)

    name = getattr(selected_recipe, "name", None)
    if name:
        return StatusResult(rt.STATUS_SUCCESS, rt.selected_reply(name), 2)

    if recipe_count > 0:
        return StatusResult(rt.STATUS_INFO, rt.available_reply(recipe_count), 3)

    return StatusResult(rt.STATUS_EMPTY, rt.NO_RECIPES_AVAILABLE, 4)


def derive_status(
    recipe_count: int = 0,
    selected_recipe: Optional[Recipe] = None,
    recipe_list_count: int = 0,
) -> StatusResult:
    """
    Single status line for the recipe selector. First matching rule wins:
      1. recipes in the list
      2. a selected recipe
      3. recipes available
      4. nothing available
    """
    return _status(recipe_count, selected_recipe, recipe_list_count)
