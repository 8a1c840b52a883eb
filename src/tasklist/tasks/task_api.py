# src/tasklist/tasks/task_api.py

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeVar

from ..core.state import AppState
from .task_models import Draft, DraftMode, Task

logger = logging.getLogger(__name__)

T = TypeVar("T")

FORM_HEADINGS: dict[DraftMode, str] = {
    DraftMode.COMPOSING: "Add New Task",
    DraftMode.EDITING: "Edit Task",
}

FORM_ACTIONS: dict[DraftMode, tuple[str, ...]] = {
    DraftMode.COMPOSING: ("add",),
    DraftMode.EDITING: ("update", "cancel"),
}

LIST_HEADING = "Your Tasks"


def run_intent(state: AppState, fn: Callable[[], T]) -> T:
    """Run one user intent against the store under the state lock."""
    with state.lock:
        return fn()


def form_heading(draft: Draft) -> str:
    return FORM_HEADINGS[draft.mode]


def form_actions(draft: Draft) -> tuple[str, ...]:
    """
    Controls the form should offer.

    Update + Cancel while a task is being edited, otherwise Add.
    """
    return FORM_ACTIONS[draft.mode]


def submit_form(state: AppState) -> Task | None:
    """
    Commit the form: add while composing, update while editing.

    Returns the created/updated task, or None if the store ignored the draft
    (empty title, stale edit target).
    """

    def _submit() -> Task | None:
        store = state.store
        if store.is_editing:
            return store.update_task()
        return store.add_task()

    task = run_intent(state, _submit)
    if task is None:
        logger.debug("Form submit ignored (mode=%s)", state.store.mode)
    return task


def resolve_task_ref(state: AppState, ref: str) -> str | None:
    """
    Map a user-supplied reference to a task id.

    Accepts a raw id or "#n" for the n-th task (1-based) in list order.
    """
    ref = ref.strip()
    if not ref:
        return None

    tasks = state.store.tasks
    if ref.startswith("#"):
        raw = ref[1:]
        if not raw.isdigit():
            return None
        idx = int(raw) - 1
        if idx < 0 or idx >= len(tasks):
            return None
        return tasks[idx].id

    return ref if state.store.get_task(ref) is not None else None
