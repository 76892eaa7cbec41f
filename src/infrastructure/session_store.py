# =========================
# FILE: craft_planner/src/infrastructure/session_store.py
# =========================
from __future__ import annotations

import threading
import time
from dataclasses import dataclass, field
from typing import Dict, Optional

from src.application.app_state import AppState, initial_app_state
from src.domain.entities import Recipe


@dataclass
class SessionState:
    session_id: str
    created_at: float = field(default_factory=time.time)
    updated_at: float = field(default_factory=time.time)

    # current snapshot; replaced wholesale on every accepted intent
    app_state: AppState = field(default_factory=initial_app_state)
    selected_recipe: Optional[Recipe] = None


class InMemorySessionStore:
    def __init__(self, ttl_seconds: int = 1800) -> None:
        self.ttl_seconds = ttl_seconds
        self._data: Dict[str, SessionState] = {}
        self._lock = threading.RLock()

    def get_or_create(self, session_id: str) -> SessionState:
        with self._lock:
            self._gc()
            st = self._data.get(session_id)
            if st is None:
                st = SessionState(session_id=session_id)
                self._data[session_id] = st
            st.updated_at = time.time()
            return st

    def save(self, st: SessionState) -> None:
        with self._lock:
            st.updated_at = time.time()
            self._data[st.session_id] = st

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)

    def _gc(self) -> None:
        # caller holds self._lock
        now = time.time()
        expired = [k for k, v in self._data.items() if now - v.updated_at > self.ttl_seconds]
        for k in expired:
            self._data.pop(k, None)
