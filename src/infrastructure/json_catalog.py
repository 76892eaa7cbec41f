# craft_planner/src/infrastructure/json_catalog.py
from __future__ import annotations
from typing import Any, Dict, List, Optional
import logging
import ujson as json
from src.domain.entities import RawComponent, Recipe, RecipeComponent

log = logging.getLogger("infra.json_catalog")

_RESERVED = {"id", "name", "type", "description", "recipe", "components"}


def _key(v: Any) -> str:
    return str(v).strip().lower()


class InMemoryCatalog:
    """
    Read-only catalog over already-parsed recipes and raw components.
    Lookups by id first, then by case-insensitive name.
    """
    def __init__(self, recipes: List[Recipe], raw_components: List[RawComponent]) -> None:
        self._recipes = list(recipes)
        self._raw = list(raw_components)
        self._recipe_by_id = {r.id: r for r in self._recipes if r.id is not None}
        self._recipe_by_name = {_key(r.name): r for r in self._recipes if r.name}
        self._raw_by_id = {c.id: c for c in self._raw if c.id is not None}
        self._raw_by_name = {_key(c.name): c for c in self._raw if c.name}

    def recipes(self) -> List[Recipe]:
        return self._recipes

    def raw_components(self) -> List[RawComponent]:
        return self._raw

    def recipe_by_id(self, recipe_id: Any) -> Optional[Recipe]:
        r = self._recipe_by_id.get(recipe_id)
        if r is None and isinstance(recipe_id, str) and recipe_id.strip().isdigit():
            # ids arrive as strings from path/query params
            r = self._recipe_by_id.get(int(recipe_id))
        return r

    def find_recipe(self, identifier: Any) -> Optional[Recipe]:
        if identifier is None:
            return None
        return self.recipe_by_id(identifier) or self._recipe_by_name.get(_key(identifier))

    def find_recipe_by_name(self, name: Any) -> Optional[Recipe]:
        if name is None:
            return None
        return self._recipe_by_name.get(_key(name))

    def find_raw_component(self, identifier: Any) -> Optional[RawComponent]:
        if identifier is None:
            return None
        return self._raw_by_id.get(identifier) or self._raw_by_name.get(_key(identifier))


class JsonCatalogRepository(InMemoryCatalog):
    """
    Catalog backed by a JSON file: {"recipes": [...], "raw_components": [...]}.
    Loaded once at startup.
    """
    def __init__(self, path: str) -> None:
        self.path = path
        with open(path, "r", encoding="utf-8") as f:
            doc = json.load(f)
        recipes = [self._parse_recipe(d) for d in (doc.get("recipes") or [])]
        raw = [self._parse_raw(d) for d in (doc.get("raw_components") or [])]
        super().__init__(recipes, raw)
        if not recipes:
            log.warning("JsonCatalogRepository: no recipes in %s", path)
        else:
            log.info("JsonCatalogRepository loaded %d recipes, %d raw components", len(recipes), len(raw))

    @staticmethod
    def _parse_recipe(doc: Dict[str, Any]) -> Recipe:
        try:
            # components may sit under a nested "recipe" block
            nested = doc.get("recipe") or {}
            comps = doc.get("components") or nested.get("components") or []
            return Recipe(
                id=doc.get("id"),
                name=(doc.get("name") or "").strip(),
                components=tuple(
                    RecipeComponent(name=str(c["name"]).strip(), quantity=c.get("quantity", 1))
                    for c in comps
                ),
                type=doc.get("type"),
                description=doc.get("description"),
                extra={
                    **{k: v for k, v in nested.items() if k != "components"},
                    **{k: v for k, v in doc.items() if k not in _RESERVED},
                },
            )
        except Exception as e:
            log.exception("Invalid recipe document: %s", doc)
            raise ValueError(f"Invalid recipe document: {e}") from e

    @staticmethod
    def _parse_raw(doc: Dict[str, Any]) -> RawComponent:
        try:
            gathering = doc.get("gathering") or {}
            return RawComponent(
                id=doc["id"],
                name=(doc.get("name") or "").strip(),
                description=doc.get("description"),
                gathering_skill=gathering.get("skill"),
                gathering_level=gathering.get("skillLevel") or gathering.get("skill_level"),
            )
        except Exception as e:
            log.exception("Invalid raw component document: %s", doc)
            raise ValueError(f"Invalid raw component document: {e}") from e
