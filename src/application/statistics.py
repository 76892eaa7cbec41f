# craft_planner/src/application/statistics.py
from __future__ import annotations

from typing import Any, Dict, Iterable, Mapping, Optional

from src.domain.entities import Component, RecipeListState


def selection_stats(available_count: int, recipe_list: RecipeListState) -> Dict[str, Any]:
    selected = len(recipe_list.recipes)
    remaining = available_count - selected
    unique = {e.recipe.id for e in recipe_list.recipes}
    return {
        "total_recipes": available_count,
        "selected_count": selected,
        "available_count": remaining,
        "duplicate_count": selected - len(unique),
        "has_recipes": selected > 0,
        "can_add_more": remaining > 0,
    }


def component_status(component: Component, have: float) -> Dict[str, Any]:
    return {
        "component_id": component.id,
        "current_quantity": have,
        "is_complete": have >= component.quantity,
        "shortage": max(0, component.quantity - have),
    }


def progress_metrics(
    components: Iterable[Component],
    have: Optional[Mapping[Any, float]] = None,
) -> Dict[str, Any]:
    """Gathering progress: how much of each required component the user already holds."""
    comps = list(components)
    held = have or {}
    # JSON bodies key by string, so fall back to str(id)
    statuses = [component_status(c, float(held.get(c.id, held.get(str(c.id), 0)) or 0)) for c in comps]
    completed = sum(1 for s in statuses if s["is_complete"])
    return {
        "total_components": len(comps),
        "completed_components": completed,
        "total_quantity_needed": sum(c.quantity for c in comps),
        "total_quantity_have": sum(s["current_quantity"] for s in statuses),
        "is_all_complete": bool(comps) and completed == len(comps),
        "components": statuses,
    }
