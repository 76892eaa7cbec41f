# craft_planner/src/application/component_list_store.py
from __future__ import annotations

from dataclasses import replace
from typing import Any, Mapping, Optional, Tuple, assert_never

from src.domain.entities import Component, ComponentListState
from src.domain.intents import (
    AddComponent,
    ClearComponents,
    ComponentListIntent,
    RemoveComponent,
    SetComponents,
    UpdateComponentQuantity,
)

INITIAL_COMPONENT_LIST = ComponentListState()


def _as_component(item: Any) -> Optional[Component]:
    if isinstance(item, Component):
        return item
    if isinstance(item, Mapping):
        return Component.from_dict(item)
    return None


def normalize_components(components: Any) -> Tuple[Component, ...]:
    """
    Defensive normalization of an externally computed list:
    - not a list/tuple (None, str, dict, generator...) -> empty
    - mapping items coerced to Component, anything else dropped
    """
    if not isinstance(components, (list, tuple)):
        return ()
    out = (_as_component(c) for c in components)
    return tuple(c for c in out if c is not None)


def set_components(state: ComponentListState, components: Any) -> ComponentListState:
    return replace(state, components=normalize_components(components))


def add_component(state: ComponentListState, component: Any) -> ComponentListState:
    if isinstance(component, Mapping):
        quantity = component.get("quantity") or 1
        new = Component.from_dict(component)
    elif isinstance(component, Component):
        quantity = component.quantity or 1
        new = component
    else:
        return state
    return replace(state, components=state.components + (replace(new, quantity=quantity),))


def remove_component(state: ComponentListState, component_id: Any) -> ComponentListState:
    kept = tuple(c for c in state.components if c.id != component_id)
    if len(kept) == len(state.components):
        return state
    return replace(state, components=kept)


def update_component_quantity(state: ComponentListState, component_id: Any, quantity: float) -> ComponentListState:
    if not any(c.id == component_id for c in state.components):
        return state
    components = tuple(
        replace(c, quantity=max(0, quantity)) if c.id == component_id else c
        for c in state.components
    )
    return replace(state, components=components)


def clear_components(state: ComponentListState) -> ComponentListState:
    return replace(state, components=())


def reduce_component_list(state: ComponentListState, intent: ComponentListIntent) -> ComponentListState:
    """Pure transition for the aggregated component list. is_calculating is never touched here."""
    match intent:
        case SetComponents(components=components):
            return set_components(state, components)
        case AddComponent(component=component):
            return add_component(state, component)
        case RemoveComponent(component_id=component_id):
            return remove_component(state, component_id)
        case UpdateComponentQuantity(component_id=component_id, quantity=quantity):
            return update_component_quantity(state, component_id, quantity)
        case ClearComponents():
            return clear_components(state)
        case _:
            assert_never(intent)
