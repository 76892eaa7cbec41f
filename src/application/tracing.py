# craft_planner/src/application/tracing.py
from __future__ import annotations

import dataclasses
import functools
import logging
from typing import Any, Callable, Dict, Optional, TypeVar

from src.domain.intents import intent_tag

S = TypeVar("S")

log = logging.getLogger("app.tracing")


def _payload(intent: Any) -> Dict[str, Any]:
    if not dataclasses.is_dataclass(intent):
        return {}
    out: Dict[str, Any] = {}
    for f in dataclasses.fields(intent):
        v = getattr(intent, f.name)
        # recipes/components are logged by id to keep lines short
        out[f.name] = getattr(v, "id", v)
    return out


def summarize(state: Any) -> Dict[str, Any]:
    """Short, log-friendly view of a snapshot (sizes only)."""
    out: Dict[str, Any] = {}
    for name in ("recipe_list", "component_list"):
        sub = getattr(state, name, None)
        if sub is not None:
            out.update(summarize(sub))
    if hasattr(state, "recipes"):
        out["recipes"] = len(state.recipes)
        out["count"] = state.count
    if hasattr(state, "components"):
        out["components"] = len(state.components)
        out["is_calculating"] = state.is_calculating
    return out


def traced(
    transition: Callable[[S, Any], S],
    logger: Optional[logging.Logger] = None,
) -> Callable[[S, Any], S]:
    """
    Wrap a pure transition so each intent and the resulting snapshot are logged.
    The wrapped transition's return value is passed through untouched.
    """
    lg = logger or log

    @functools.wraps(transition)
    def wrapper(state: S, intent: Any) -> S:
        lg.debug("intent %s payload=%s", intent_tag(intent), _payload(intent))
        new_state = transition(state, intent)
        lg.debug(
            "intent %s changed=%s state=%s",
            intent_tag(intent),
            new_state is not state,
            summarize(new_state),
        )
        return new_state

    return wrapper
