# src/tasklist/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local (gitignored) data directory exists,
- wires the concrete TaskStore into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..tasks.task_store import IdFactory, TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    if getattr(settings, "log_to_file", False):
        settings.data_dir.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None, id_factory: IdFactory | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    state = AppState(
        settings=settings,
        store=TaskStore(id_factory=id_factory),
    )
    logger.debug("AppState created (app=%s)", getattr(settings, "app_name", "tasklist"))
    return state
