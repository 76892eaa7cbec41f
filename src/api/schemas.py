# =========================
# FILE: craft_planner/src/api/schemas.py
# =========================
from __future__ import annotations

from typing import Annotated, Any, Dict, List, Literal, Optional, Union
from pydantic import BaseModel, Field

RecipeId = Union[int, str]


class AddRecipeRequest(BaseModel):
    type: Literal["add_recipe"]
    recipe_id: RecipeId = Field(..., description="Catalog id of the recipe to add")


class RemoveRecipeRequest(BaseModel):
    type: Literal["remove_recipe"]
    recipe_id: RecipeId


class ClearListRequest(BaseModel):
    type: Literal["clear_list"]


class UpdateQuantityRequest(BaseModel):
    type: Literal["update_quantity"]
    recipe_id: RecipeId
    quantity: int = Field(..., examples=[3])


class ComponentIn(BaseModel):
    id: RecipeId
    name: str
    quantity: Optional[float] = None
    description: Optional[str] = None
    gathering_skill: Optional[str] = None
    gathering_level: Optional[str] = None


class AddComponentRequest(BaseModel):
    type: Literal["add_component"]
    component: ComponentIn


class RemoveComponentRequest(BaseModel):
    type: Literal["remove_component"]
    component_id: RecipeId


class UpdateComponentQuantityRequest(BaseModel):
    type: Literal["update_component_quantity"]
    component_id: RecipeId
    quantity: float


class ClearComponentsRequest(BaseModel):
    type: Literal["clear_components"]


IntentRequest = Annotated[
    Union[
        AddRecipeRequest,
        RemoveRecipeRequest,
        ClearListRequest,
        UpdateQuantityRequest,
        AddComponentRequest,
        RemoveComponentRequest,
        UpdateComponentQuantityRequest,
        ClearComponentsRequest,
    ],
    Field(discriminator="type"),
]


class SelectRequest(BaseModel):
    recipe_id: Optional[RecipeId] = Field(default=None, description="null clears the selection")


class ProgressRequest(BaseModel):
    have: Dict[str, float] = Field(default_factory=dict, description="component id -> quantity held")


class RecipeOut(BaseModel):
    id: Optional[RecipeId] = None
    name: str
    type: Optional[str] = None
    description: Optional[str] = None
    components: List[Dict[str, Any]] = Field(default_factory=list)


class ValidationOut(BaseModel):
    has_selection: bool
    is_already_selected: bool
    can_add_selected: bool
    can_clear_list: bool
    validation_message: str


class StatusOut(BaseModel):
    type: str
    message: str
    priority: int = Field(ge=1, le=4)


class SessionResponse(BaseModel):
    session_id: str
    recipe_list: Dict[str, Any]
    component_list: Dict[str, Any]
    selected_recipe: Optional[Dict[str, Any]] = None
    validation: ValidationOut
    status: StatusOut
    stats: Dict[str, Any]
    cost_breakdown: Dict[str, Any]
    gathering_order: List[Dict[str, Any]] = Field(default_factory=list)
    dependencies: Dict[str, List[Dict[str, Any]]] = Field(default_factory=dict)
    changed: Optional[bool] = None


class ProgressResponse(BaseModel):
    total_components: int
    completed_components: int
    total_quantity_needed: float
    total_quantity_have: float
    is_all_complete: bool
    components: List[Dict[str, Any]]
