# craft_planner/src/api/routes.py
from __future__ import annotations

import logging
from typing import Any, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from src.api.schemas import (
    AddComponentRequest,
    AddRecipeRequest,
    ClearComponentsRequest,
    ClearListRequest,
    IntentRequest,
    ProgressRequest,
    ProgressResponse,
    RecipeOut,
    RemoveComponentRequest,
    RemoveRecipeRequest,
    SelectRequest,
    SessionResponse,
    UpdateComponentQuantityRequest,
    UpdateQuantityRequest,
)
from src.application.recipe_queries import filter_recipes, sort_recipes
from src.domain import intents as it

log = logging.getLogger("api.routes")
router = APIRouter()


# -------------------------
# Dependencies via app.state
# -------------------------
def get_planner(request: Request):
    planner = getattr(request.app.state, "planner", None)
    if planner is None:
        raise RuntimeError("planner not initialized. Check app startup wiring.")
    return planner


def get_catalog(request: Request):
    catalog = getattr(request.app.state, "catalog", None)
    if catalog is None:
        raise RuntimeError("catalog not initialized. Check app startup wiring.")
    return catalog


def _session_id(session_id: str) -> str:
    sid = (session_id or "").strip()
    if not sid:
        raise HTTPException(status_code=400, detail="session_id is required")
    return sid


def _catalog_recipe_id(catalog, recipe_id: Any) -> Any:
    # path/body ids may be strings; prefer the catalog's own id when it resolves
    recipe = catalog.recipe_by_id(recipe_id)
    return recipe.id if recipe is not None else recipe_id


def to_intent(req: Any, catalog) -> Any:
    """Request body -> domain intent. Unknown recipe on add -> LookupError."""
    match req:
        case AddRecipeRequest(recipe_id=recipe_id):
            recipe = catalog.recipe_by_id(recipe_id)
            if recipe is None:
                raise LookupError(f"Recipe not found: {recipe_id}")
            return it.AddRecipe(recipe)
        case RemoveRecipeRequest(recipe_id=recipe_id):
            return it.RemoveRecipe(_catalog_recipe_id(catalog, recipe_id))
        case ClearListRequest():
            return it.ClearList()
        case UpdateQuantityRequest(recipe_id=recipe_id, quantity=quantity):
            return it.UpdateQuantity(_catalog_recipe_id(catalog, recipe_id), quantity)
        case AddComponentRequest(component=component):
            return it.AddComponent(component.model_dump())
        case RemoveComponentRequest(component_id=component_id):
            return it.RemoveComponent(component_id)
        case UpdateComponentQuantityRequest(component_id=component_id, quantity=quantity):
            return it.UpdateComponentQuantity(component_id, quantity)
        case ClearComponentsRequest():
            return it.ClearComponents()
    raise ValueError(f"Unsupported intent: {req!r}")


@router.get("/recipes", response_model=List[RecipeOut])
def list_recipes(
    recipe_type: Optional[str] = Query(None, alias="type"),
    name: Optional[str] = None,
    component: Optional[str] = None,
    artisan_skill: Optional[str] = None,
    sort_by: str = "name",
    order: str = "asc",
    include_all: bool = False,
    planner=Depends(get_planner),
    catalog=Depends(get_catalog),
) -> Any:
    """Selectable recipes (configured types only unless include_all), optionally filtered and sorted."""
    base = catalog.recipes() if include_all else planner.available_recipes()
    try:
        found = filter_recipes(base, type=recipe_type, name_contains=name, component=component, artisan_skill=artisan_skill)
        return [r.to_dict() for r in sort_recipes(found, sort_by, order)]
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/sessions/{session_id}", response_model=SessionResponse)
async def get_session(session_id: str, planner=Depends(get_planner)) -> Any:
    return planner.view(_session_id(session_id))


# -------------------------
# /intents (async: session handlers run on the event loop, one at a time)
# -------------------------
@router.post("/sessions/{session_id}/intents", response_model=SessionResponse)
async def dispatch_intent(
    session_id: str,
    req: IntentRequest,
    planner=Depends(get_planner),
    catalog=Depends(get_catalog),
) -> Any:
    sid = _session_id(session_id)
    try:
        return planner.dispatch(sid, to_intent(req, catalog))
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        log.exception("Processing /intents error")
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/sessions/{session_id}/select", response_model=SessionResponse)
async def select_recipe(session_id: str, req: SelectRequest, planner=Depends(get_planner)) -> Any:
    sid = _session_id(session_id)
    try:
        return planner.select(sid, req.recipe_id)
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        log.exception("Processing /select error")
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/sessions/{session_id}/progress", response_model=ProgressResponse)
async def component_progress(session_id: str, req: ProgressRequest, planner=Depends(get_planner)) -> Any:
    return planner.progress(_session_id(session_id), req.have)
