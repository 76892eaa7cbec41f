# craft_planner/src/domain/repositories.py
from __future__ import annotations

from typing import Any, List, Optional, Protocol

from src.domain.entities import RawComponent, Recipe


class CatalogReadRepo(Protocol):
    """Read-only view over the recipe catalog (craftable recipes + raw components)."""

    def recipes(self) -> List[Recipe]: ...

    def raw_components(self) -> List[RawComponent]: ...

    def recipe_by_id(self, recipe_id: Any) -> Optional[Recipe]: ...

    def find_recipe(self, identifier: Any) -> Optional[Recipe]: ...

    def find_recipe_by_name(self, name: Any) -> Optional[Recipe]: ...

    def find_raw_component(self, identifier: Any) -> Optional[RawComponent]: ...
