from __future__ import annotations

import logging
from typing import Optional, Sequence

import uvicorn
from fastapi import FastAPI
from dotenv import load_dotenv
load_dotenv()
from src.api.routes import router
from src.core.config import ALLOWED_RECIPE_TYPES, CATALOG_PATH, HOST, PORT, SESSION_TTL_SECONDS, TRACE_INTENTS

from src.application.component_calculator import ComponentCalculator
from src.application.planner_service import PlannerService
from src.domain.repositories import CatalogReadRepo
from src.infrastructure.json_catalog import JsonCatalogRepository
from src.infrastructure.session_store import InMemorySessionStore

log = logging.getLogger("app")


def create_app(
    catalog: Optional[CatalogReadRepo] = None,
    trace_intents: bool = TRACE_INTENTS,
    allowed_types: Sequence[str] = ALLOWED_RECIPE_TYPES,
) -> FastAPI:
    """App factory; pass a catalog to skip loading CATALOG_PATH (tests, embedding)."""
    app = FastAPI(title="Craft Planner")

    @app.on_event("startup")
    def on_startup() -> None:
        cat = catalog if catalog is not None else JsonCatalogRepository(CATALOG_PATH)

        sessions = InMemorySessionStore(ttl_seconds=SESSION_TTL_SECONDS)
        planner = PlannerService(
            sessions=sessions,
            catalog=cat,
            calculator=ComponentCalculator(cat),
            trace_intents=trace_intents,
            allowed_types=allowed_types,
        )

        # DI for routes.py
        app.state.catalog = cat
        app.state.planner = planner
        app.state.sessions = sessions
        log.info(
            "Startup complete (recipes=%d, selectable=%d, trace_intents=%s)",
            len(cat.recipes()),
            len(planner.available_recipes()),
            trace_intents,
        )

    app.include_router(router)
    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run("main:app", host=HOST, port=PORT, reload=False)
