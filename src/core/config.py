# craft_planner/src/core/config.py
from __future__ import annotations
from dataclasses import dataclass
import os
import logging


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Paths:
    ROOT: str = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))
    CATALOG_JSON: str = os.path.join(ROOT, "data", "catalog.json")


# Sessions
SESSION_TTL_SECONDS: int = int(os.getenv("SESSION_TTL_SECONDS", "1800"))

# Catalog (recipes + raw components)
CATALOG_PATH: str = os.getenv("CATALOG_PATH", Paths.CATALOG_JSON)

# Server
HOST: str = os.getenv("HOST", "0.0.0.0")
PORT: int = int(os.getenv("PORT", "8081"))

# Log every dispatched intent and the resulting snapshot at DEBUG
TRACE_INTENTS: bool = _env_bool("TRACE_INTENTS")

# Recipe types offered for selection; empty means every type
ALLOWED_RECIPE_TYPES: tuple = tuple(
    t.strip() for t in os.getenv("ALLOWED_RECIPE_TYPES", "intermediate_recipes,crafted_items").split(",") if t.strip()
)

# Global logging (module-level loggers inherit this)
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
)
LOGGER = logging.getLogger("craft_planner")
