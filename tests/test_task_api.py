# tests/test_task_api.py

from __future__ import annotations

import threading

from tasklist.core.state import AppState
from tasklist.tasks.task_api import (
    form_actions,
    form_heading,
    resolve_task_ref,
    run_intent,
    submit_form,
)
from tasklist.tasks.task_models import Draft


def test_form_decision_rule() -> None:
    composing = Draft(title="x")
    editing = Draft(title="x", editing_id="t1")

    assert form_heading(composing) == "Add New Task"
    assert form_actions(composing) == ("add",)
    assert form_heading(editing) == "Edit Task"
    assert form_actions(editing) == ("update", "cancel")


def test_submit_form_adds_while_composing(state: AppState) -> None:
    state.store.set_draft_title("Buy milk")
    task = submit_form(state)
    assert task is not None
    assert state.store.tasks == (task,)


def test_submit_form_updates_while_editing(state: AppState) -> None:
    state.store.set_draft_title("Buy milk")
    task = submit_form(state)
    assert task is not None

    state.store.start_editing(task.id)
    state.store.set_draft_title("Buy oat milk")
    updated = submit_form(state)

    assert updated is not None
    assert updated.id == task.id
    assert [t.title for t in state.store.tasks] == ["Buy oat milk"]
    assert not state.store.is_editing


def test_submit_form_with_empty_title_returns_none(state: AppState) -> None:
    state.store.set_draft_title("   ")
    assert submit_form(state) is None
    assert len(state.store) == 0


def test_run_intent_holds_the_state_lock(state: AppState) -> None:
    seen: list[bool] = []

    def probe() -> str:
        acquired_elsewhere = threading.Event()

        def other() -> None:
            if state.lock.acquire(blocking=False):
                state.lock.release()
                acquired_elsewhere.set()

        t = threading.Thread(target=other)
        t.start()
        t.join()
        seen.append(acquired_elsewhere.is_set())
        return "done"

    assert run_intent(state, probe) == "done"
    assert seen == [False]


def test_resolve_task_ref_by_id_and_position(state: AppState) -> None:
    for title in ("a", "b", "c"):
        state.store.set_draft_title(title)
        state.store.add_task()
    ids = [t.id for t in state.store.tasks]

    assert resolve_task_ref(state, ids[1]) == ids[1]
    assert resolve_task_ref(state, "#1") == ids[0]
    assert resolve_task_ref(state, " #3 ") == ids[2]
    assert resolve_task_ref(state, "#0") is None
    assert resolve_task_ref(state, "#4") is None
    assert resolve_task_ref(state, "#x") is None
    assert resolve_task_ref(state, "unknown") is None
    assert resolve_task_ref(state, "") is None
