# craft_planner/src/application/component_calculator.py
from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Dict, FrozenSet, Iterable, List, Mapping, Optional

from src.domain.entities import Component, RecipeListState
from src.domain.repositories import CatalogReadRepo

log = logging.getLogger("app.component_calculator")


def _scale_qty(qty: Any, factor: float) -> float:
    try:
        return float(qty) * factor
    except (TypeError, ValueError):
        return 0.0


def _tidy(qty: float) -> float | int:
    return int(qty) if float(qty).is_integer() else qty


def consolidate_by_id(components: Iterable[Component]) -> List[Component]:
    """Sum quantities of components sharing an id; first-seen order is kept."""
    merged: Dict[Any, Component] = {}
    for c in components:
        prev = merged.get(c.id)
        if prev is None:
            merged[c.id] = c
        else:
            merged[c.id] = replace(prev, quantity=_tidy(prev.quantity + c.quantity))
    return list(merged.values())


class ComponentCalculator:
    """Recipe list -> raw components, resolved recursively against the catalog."""

    def __init__(self, catalog: CatalogReadRepo) -> None:
        self.catalog = catalog

    def break_down(
        self,
        component_name: str,
        quantity: float = 1,
        visited: Optional[FrozenSet[str]] = None,
    ) -> List[Component]:
        path = visited or frozenset()
        if component_name in path:
            log.warning("Circular dependency detected for %s", component_name)
            return []

        raw = self.catalog.find_raw_component(component_name)
        if raw is not None:
            return [
                Component(
                    id=raw.id,
                    name=component_name,
                    quantity=_tidy(quantity),
                    is_raw=True,
                    description=raw.description,
                    gathering_skill=raw.gathering_skill,
                    gathering_level=raw.gathering_level,
                )
            ]

        processing = self.catalog.find_recipe_by_name(component_name)
        if processing is not None and processing.components:
            sub_path = path | {component_name}
            out: List[Component] = []
            for sub in processing.components:
                out.extend(self.break_down(sub.name, _scale_qty(sub.quantity, quantity), sub_path))
            return out

        log.warning("Component %s not found in raw components or processing recipes", component_name)
        return [
            Component(
                id=f"unknown_{component_name}",
                name=component_name,
                quantity=_tidy(quantity),
                is_unknown=True,
            )
        ]

    def calculate(self, recipe_list: RecipeListState) -> List[Component]:
        entries = [e for e in recipe_list.recipes if e.recipe.components]
        if not entries:
            return []

        found: List[Component] = []
        for entry in entries:
            for comp in entry.recipe.components:
                found.extend(self.break_down(comp.name, _scale_qty(comp.quantity, entry.quantity)))

        consolidated = consolidate_by_id(found)
        log.debug("calculated %d raw components from %d recipes", len(consolidated), len(entries))
        return consolidated

    @staticmethod
    def cost_breakdown(components: Iterable[Component]) -> Dict[str, Any]:
        comps = list(components)
        by_skill: Dict[str, Dict[str, Any]] = {}
        for c in comps:
            skill = c.gathering_skill or "unknown"
            group = by_skill.setdefault(skill, {"skill": skill, "components": [], "total_items": 0})
            group["components"].append(c.to_dict())
            group["total_items"] = _tidy(group["total_items"] + c.quantity)

        return {
            "breakdown": by_skill,
            "total_unique_components": len(comps),
            "total_items": _tidy(sum(c.quantity for c in comps)),
            "skills_required": list(by_skill.keys()),
        }

    @staticmethod
    def gathering_order(
        components: Iterable[Component],
        skill_efficiency: Optional[Mapping[str, float]] = None,
    ) -> List[Dict[str, Any]]:
        """
        Group components by gathering skill, most efficient skill first.
        Skills without an efficiency rating count as 1; ties keep first-seen order.
        """
        eff = skill_efficiency or {}
        grouped: Dict[str, List[Component]] = {}
        for c in components:
            grouped.setdefault(c.gathering_skill or "unknown", []).append(c)

        skills = sorted(grouped, key=lambda s: eff.get(s) or 1, reverse=True)
        return [
            {
                "skill": skill,
                "components": [c.to_dict() for c in grouped[skill]],
                "total_quantity": _tidy(sum(c.quantity for c in grouped[skill])),
                "efficiency": eff.get(skill) or 1,
            }
            for skill in skills
        ]

    def recipe_dependencies(self, recipe_list: RecipeListState) -> Dict[Any, List[Dict[str, Any]]]:
        """Direct sub-recipes of each listed recipe; raw and unknown components are left out."""
        deps: Dict[Any, List[Dict[str, Any]]] = {}
        for entry in recipe_list.recipes:
            recipe = entry.recipe
            if not recipe.components:
                continue
            found = []
            for comp in recipe.components:
                sub = self.catalog.find_recipe_by_name(comp.name)
                if sub is not None:
                    found.append({"id": sub.id, "name": comp.name, "quantity": comp.quantity})
            deps[recipe.id] = found
        return deps
