# src/tasklist/tasks/task_store.py

from __future__ import annotations

import itertools
import logging
import time
from collections.abc import Callable, Iterator
from dataclasses import replace

from .task_models import EMPTY_DRAFT, Draft, DraftMode, Task

logger = logging.getLogger(__name__)

IdFactory = Callable[[], str]


def make_id_factory() -> IdFactory:
    """
    Timestamp-derived ids ("<epoch ms>-<seq>").

    The sequence number keeps ids distinct when several tasks are created
    within the same millisecond.
    """
    seq = itertools.count(1)

    def _next_id() -> str:
        return f"{int(time.time() * 1000)}-{next(seq)}"

    return _next_id


class TaskStore:
    """
    In-memory task list plus the draft that backs the task form.

    Mutation surface:
    - set_draft_title / set_draft_description
    - add_task, start_editing, update_task, delete_task, cancel_editing

    Invalid calls never raise; they leave the state untouched and return
    None/False so callers can tell a no-op apart from a change.
    """

    def __init__(self, *, id_factory: IdFactory | None = None) -> None:
        self._id_factory = id_factory or make_id_factory()
        self._tasks: list[Task] = []
        self._draft: Draft = EMPTY_DRAFT
        self._issued_ids: set[str] = set()
        logger.info("TaskStore ready (in-memory)")

    # ---- read views ----

    @property
    def tasks(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    @property
    def draft(self) -> Draft:
        return self._draft

    @property
    def mode(self) -> DraftMode:
        return self._draft.mode

    @property
    def is_editing(self) -> bool:
        return self._draft.is_editing

    def get_task(self, task_id: str) -> Task | None:
        idx = self._index_of(task_id)
        return self._tasks[idx] if idx is not None else None

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.tasks)

    def __contains__(self, task_id: object) -> bool:
        return isinstance(task_id, str) and self._index_of(task_id) is not None

    # ---- low-level helpers ----

    def _index_of(self, task_id: str | None) -> int | None:
        if task_id is None:
            return None
        for idx, task in enumerate(self._tasks):
            if task.id == task_id:
                return idx
        return None

    def _new_id(self) -> str:
        while True:
            task_id = str(self._id_factory())
            if task_id not in self._issued_ids:
                self._issued_ids.add(task_id)
                return task_id
            logger.warning("Id factory returned a used id=%s; retrying", task_id)

    def _reset_draft(self) -> None:
        self._draft = EMPTY_DRAFT

    # ---- draft fields ----

    def set_draft_title(self, text: str) -> None:
        self._draft = replace(self._draft, title=text)

    def set_draft_description(self, text: str) -> None:
        self._draft = replace(self._draft, description=text)

    # ---- operations ----

    def add_task(self) -> Task | None:
        draft = self._draft
        if draft.is_editing:
            logger.warning("add_task called while editing id=%s; ignored", draft.editing_id)
            return None

        title = draft.title.strip()
        if not title:
            logger.debug("add_task skipped: empty title")
            return None

        task = Task(id=self._new_id(), title=title, description=draft.description.strip())
        self._tasks.append(task)
        self._reset_draft()
        logger.debug("Task added id=%s total=%s", task.id, len(self._tasks))
        return task

    def start_editing(self, task_id: str) -> bool:
        """
        Load a task into the draft.

        Repeated calls re-copy the task's current fields; unsaved draft edits
        are discarded.
        """
        task = self.get_task(task_id)
        if task is None:
            logger.debug("start_editing skipped: unknown id=%s", task_id)
            return False

        self._draft = Draft(title=task.title, description=task.description, editing_id=task.id)
        logger.debug("Editing task id=%s", task.id)
        return True

    def update_task(self) -> Task | None:
        draft = self._draft
        if not draft.is_editing:
            logger.warning("update_task called while composing; ignored")
            return None

        idx = self._index_of(draft.editing_id)
        if idx is None:
            logger.debug("update_task skipped: edit target id=%s is gone", draft.editing_id)
            return None

        title = draft.title.strip()
        if not title:
            logger.debug("update_task skipped: empty title (id=%s)", draft.editing_id)
            return None

        updated = replace(self._tasks[idx], title=title, description=draft.description.strip())
        self._tasks[idx] = updated
        self._reset_draft()
        logger.debug("Task updated id=%s", updated.id)
        return updated

    def delete_task(self, task_id: str) -> bool:
        idx = self._index_of(task_id)
        if idx is None:
            logger.debug("delete_task skipped: unknown id=%s", task_id)
            return False

        del self._tasks[idx]
        if self._draft.editing_id == task_id:
            # The edit target no longer exists.
            self._reset_draft()
            logger.debug("Draft reset: edited task id=%s was deleted", task_id)
        logger.debug("Task deleted id=%s total=%s", task_id, len(self._tasks))
        return True

    def cancel_editing(self) -> None:
        self._reset_draft()
