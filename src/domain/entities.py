# craft_planner/src/domain/entities.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Tuple


@dataclass(frozen=True)
class RecipeComponent:
    name: str
    quantity: float = 1


@dataclass(frozen=True)
class Recipe:
    id: Any
    name: str
    components: Tuple[RecipeComponent, ...] = ()
    type: str | None = None
    description: str | None = None
    extra: Dict[str, Any] = field(default_factory=dict, compare=False, hash=False)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "type": self.type,
            "description": self.description,
            "components": [{"name": c.name, "quantity": c.quantity} for c in self.components],
            **self.extra,
        }


@dataclass(frozen=True)
class RawComponent:
    id: Any
    name: str
    description: str | None = None
    gathering_skill: str | None = None
    gathering_level: str | None = None


@dataclass(frozen=True)
class RecipeListEntry:
    recipe: Recipe
    quantity: int = 1


@dataclass(frozen=True)
class RecipeListState:
    recipes: Tuple[RecipeListEntry, ...] = ()
    count: int = 0


@dataclass(frozen=True)
class Component:
    id: Any
    name: str
    quantity: float = 1
    is_raw: bool = False
    is_unknown: bool = False
    description: str | None = None
    gathering_skill: str | None = None
    gathering_level: str | None = None

    @classmethod
    def from_dict(cls, doc: Mapping[str, Any]) -> "Component":
        return cls(
            id=doc.get("id"),
            name=str(doc.get("name") or ""),
            quantity=doc.get("quantity") or 0,
            is_raw=bool(doc.get("is_raw", False)),
            is_unknown=bool(doc.get("is_unknown", False)),
            description=doc.get("description"),
            gathering_skill=doc.get("gathering_skill"),
            gathering_level=doc.get("gathering_level"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "quantity": self.quantity,
            "is_raw": self.is_raw,
            "is_unknown": self.is_unknown,
            "description": self.description,
            "gathering_skill": self.gathering_skill,
            "gathering_level": self.gathering_level,
        }


@dataclass(frozen=True)
class ComponentListState:
    components: Tuple[Component, ...] = ()
    is_calculating: bool = False


@dataclass(frozen=True)
class ValidationResult:
    has_selection: bool
    is_already_selected: bool
    can_add_selected: bool
    can_clear_list: bool
    validation_message: str


@dataclass(frozen=True)
class StatusResult:
    type: str  # "success" | "info" | "empty"
    message: str
    priority: int
