# src/tasklist/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class DraftMode(StrEnum):
    """
    Form mode derived from the draft.

    - composing: no edit target, the form creates a new task
    - editing: the form commits changes into an existing task
    """

    COMPOSING = "composing"
    EDITING = "editing"


@dataclass(frozen=True, slots=True)
class Task:
    id: str
    title: str
    description: str = ""


@dataclass(frozen=True, slots=True)
class Draft:
    """
    Transient edit buffer behind the task form.

    Titles are kept exactly as typed; trimming happens only when the draft
    is committed into a Task.
    """

    title: str = ""
    description: str = ""
    editing_id: str | None = None

    @property
    def mode(self) -> DraftMode:
        return DraftMode.COMPOSING if self.editing_id is None else DraftMode.EDITING

    @property
    def is_editing(self) -> bool:
        return self.editing_id is not None


EMPTY_DRAFT = Draft()
