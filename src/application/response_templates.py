# =========================
# FILE: craft_planner/src/application/response_templates.py
# =========================
from __future__ import annotations

# Validation messages (exactly one per ValidationResult)
SELECT_RECIPE = "Select a recipe to add"
ALREADY_IN_LIST = "Recipe already in list"
READY_TO_ADD = "Ready to add recipe"

# Status types
STATUS_SUCCESS = "success"
STATUS_INFO = "info"
STATUS_EMPTY = "empty"

NO_RECIPES_AVAILABLE = "No recipes available"


def plural_recipes(n: int) -> str:
    return f"{n} recipe{'' if n == 1 else 's'}"


def in_list_reply(n: int) -> str:
    return f"{plural_recipes(n)} in your list"


def selected_reply(name: str) -> str:
    return f"Selected: {name}"


def available_reply(n: int) -> str:
    return f"{plural_recipes(n)} available"
