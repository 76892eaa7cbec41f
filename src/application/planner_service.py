# =========================
# FILE: craft_planner/src/application/planner_service.py
# =========================
from __future__ import annotations

import logging
import threading
from dataclasses import asdict
from typing import Any, Dict, List, Mapping, Optional, Sequence

from src.application.app_state import AppState, reduce_app
from src.application.component_calculator import ComponentCalculator
from src.application.recipe_queries import allowed_recipes
from src.application.statistics import progress_metrics, selection_stats
from src.application.status_engine import derive_status
from src.application.tracing import summarize, traced
from src.application.validation_engine import validate_selection
from src.domain.entities import ComponentListState, Recipe, RecipeListState
from src.domain.intents import RECIPE_LIST_INTENTS, SetComponents, intent_tag
from src.domain.repositories import CatalogReadRepo
from src.infrastructure.session_store import InMemorySessionStore, SessionState

log = logging.getLogger("app.planner_service")


def recipe_list_view(state: RecipeListState) -> Dict[str, Any]:
    return {
        "recipes": [{"recipe": e.recipe.to_dict(), "quantity": e.quantity} for e in state.recipes],
        "count": state.count,
    }


def component_list_view(state: ComponentListState) -> Dict[str, Any]:
    return {
        "components": [c.to_dict() for c in state.components],
        "is_calculating": state.is_calculating,
    }


class PlannerService:
    """
    Per-session dispatcher: applies intents to the session snapshot in the
    order they arrive and keeps the component list in step with the recipe list.

    Every read-reduce-write on a session runs under one lock.
    """

    def __init__(
        self,
        sessions: InMemorySessionStore,
        catalog: CatalogReadRepo,
        calculator: Optional[ComponentCalculator] = None,
        trace_intents: bool = False,
        allowed_types: Optional[Sequence[str]] = None,
    ) -> None:
        self.sessions = sessions
        self.catalog = catalog
        self.calculator = calculator or ComponentCalculator(catalog)
        self.allowed_types = tuple(allowed_types or ())
        self._reduce = traced(reduce_app, log) if trace_intents else reduce_app
        self._lock = threading.RLock()

    def available_recipes(self) -> List[Recipe]:
        return allowed_recipes(self.catalog.recipes(), self.allowed_types)

    def dispatch(self, session_id: str, intent: Any) -> Dict[str, Any]:
        with self._lock:
            st = self.sessions.get_or_create(session_id)
            before = st.app_state
            after = self._reduce(before, intent)

            if isinstance(intent, RECIPE_LIST_INTENTS) and after.recipe_list is not before.recipe_list:
                after = self._recalculate(after)

            st.app_state = after
            self.sessions.save(st)
            log.info(
                "dispatch session=%s intent=%s changed=%s state=%s",
                session_id,
                intent_tag(intent),
                after is not before,
                summarize(after),
            )
            return self._view(st, changed=after is not before)

    def select(self, session_id: str, recipe_id: Any) -> Dict[str, Any]:
        with self._lock:
            st = self.sessions.get_or_create(session_id)
            if recipe_id is None:
                st.selected_recipe = None
            else:
                recipe = self.catalog.recipe_by_id(recipe_id)
                if recipe is None:
                    raise LookupError(f"Recipe not found: {recipe_id}")
                st.selected_recipe = recipe
            self.sessions.save(st)
            return self._view(st)

    def view(self, session_id: str) -> Dict[str, Any]:
        with self._lock:
            return self._view(self.sessions.get_or_create(session_id))

    def progress(self, session_id: str, have: Mapping[Any, float]) -> Dict[str, Any]:
        with self._lock:
            st = self.sessions.get_or_create(session_id)
            return progress_metrics(st.app_state.component_list.components, have)

    def _recalculate(self, state: AppState) -> AppState:
        components = self.calculator.calculate(state.recipe_list)
        return self._reduce(state, SetComponents(components))

    def _view(self, st: SessionState, changed: Optional[bool] = None) -> Dict[str, Any]:
        app = st.app_state
        available = len(self.available_recipes())
        components = app.component_list.components
        validation = validate_selection(st.selected_recipe, app.recipe_list)
        status = derive_status(available, st.selected_recipe, app.recipe_list.count)
        out: Dict[str, Any] = {
            "session_id": st.session_id,
            "recipe_list": recipe_list_view(app.recipe_list),
            "component_list": component_list_view(app.component_list),
            "selected_recipe": st.selected_recipe.to_dict() if st.selected_recipe else None,
            "validation": asdict(validation),
            "status": asdict(status),
            "stats": selection_stats(available, app.recipe_list),
            "cost_breakdown": self.calculator.cost_breakdown(components),
            "gathering_order": self.calculator.gathering_order(components),
            "dependencies": {
                str(k): v for k, v in self.calculator.recipe_dependencies(app.recipe_list).items()
            },
        }
        if changed is not None:
            out["changed"] = changed
        return out
