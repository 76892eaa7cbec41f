# craft_planner/src/application/recipe_queries.py
"""
Catalog queries: filter predicates, type/component lookups and sorting.

Predicates are small closures over one criterion; `filter_recipes` ANDs together
every criterion that was actually supplied (None means "not filtering on this").
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence

from src.domain.entities import Recipe

log = logging.getLogger("app.recipe_queries")

Predicate = Callable[[Recipe], bool]


def _lower(v: Any) -> str:
    return str(v or "").strip().lower()


def by_id(ids: Any) -> Predicate:
    wanted = set(ids) if isinstance(ids, (list, tuple, set, frozenset)) else {ids}
    return lambda r: r.id in wanted


def by_exact_name(name: str) -> Predicate:
    return lambda r: _lower(r.name) == _lower(name)


def by_name_contains(text: str) -> Predicate:
    return lambda r: _lower(text) in _lower(r.name)


def by_type(recipe_type: str) -> Predicate:
    return lambda r: r.type == recipe_type


def by_artisan_skill(skill: str) -> Predicate:
    return lambda r: _lower(r.extra.get("artisanSkill")) == _lower(skill)


def by_work_station(station: str) -> Predicate:
    return lambda r: _lower(r.extra.get("workStation")) == _lower(station)


def by_component(component_name: str) -> Predicate:
    return lambda r: any(_lower(c.name) == _lower(component_name) for c in r.components)


def by_keywords(keywords: Any) -> Predicate:
    words = [keywords] if isinstance(keywords, str) else list(keywords)

    def _match(r: Recipe) -> bool:
        text = f"{r.name} {r.description or ''}".lower()
        return any(_lower(w) in text for w in words)

    return _match


FILTER_PREDICATES: Dict[str, Callable[[Any], Predicate]] = {
    "id": by_id,
    "name": by_exact_name,
    "name_contains": by_name_contains,
    "type": by_type,
    "artisan_skill": by_artisan_skill,
    "work_station": by_work_station,
    "component": by_component,
    "keywords": by_keywords,
}


def create_filter(**criteria: Any) -> Predicate:
    unknown = set(criteria) - set(FILTER_PREDICATES)
    if unknown:
        raise ValueError(f"Unknown filter(s): {', '.join(sorted(unknown))}")
    preds = [FILTER_PREDICATES[k](v) for k, v in criteria.items() if v is not None]
    return lambda r: all(p(r) for p in preds)


def filter_recipes(recipes: Iterable[Recipe], **criteria: Any) -> List[Recipe]:
    base = list(recipes)
    out = [r for r in base if create_filter(**criteria)(r)]
    log.debug("filtered %d recipes to %d", len(base), len(out))
    return out


def recipes_by_type(recipes: Iterable[Recipe], recipe_type: str) -> List[Recipe]:
    return [r for r in recipes if r.type == recipe_type]


def recipes_by_component(recipes: Iterable[Recipe], component_name: str) -> List[Recipe]:
    return filter_recipes(recipes, component=component_name)


def allowed_recipes(recipes: Iterable[Recipe], allowed_types: Optional[Sequence[str]]) -> List[Recipe]:
    """Recipes offered for selection. An empty or missing type list allows everything."""
    if not allowed_types:
        return list(recipes)
    return [r for r in recipes if r.type in allowed_types]


def _id_key(v: Any) -> tuple:
    # numeric ids first, in numeric order
    if isinstance(v, (int, float)):
        return (0, v, "")
    return (1, 0, str(v))


# sort keys; anything else is looked up in Recipe.extra
_SORT_KEYS: Dict[str, Callable[[Recipe], Any]] = {
    "name": lambda r: _lower(r.name),
    "id": lambda r: _id_key(r.id),
    "type": lambda r: r.type or "",
    "artisan_skill": lambda r: _lower(r.extra.get("artisanSkill")),
}


def sort_recipes(recipes: Iterable[Recipe], sort_by: str = "name", order: str = "asc") -> List[Recipe]:
    if order not in ("asc", "desc"):
        raise ValueError(f"Unknown sort order: {order}")
    key = _SORT_KEYS.get(sort_by) or (lambda r: str(r.extra.get(sort_by) or ""))
    return sorted(recipes, key=key, reverse=(order == "desc"))
