# src/tasklist/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the presentation side.

Connectors and command handlers depend on this Protocol instead of the
concrete TaskStore, so tests and alternative front ends can swap it.
"""

from collections.abc import Iterator
from typing import Protocol

from ..tasks.task_models import Draft, DraftMode, Task


class TaskRepo(Protocol):
    # Read views
    @property
    def tasks(self) -> tuple[Task, ...]: ...
    @property
    def draft(self) -> Draft: ...
    @property
    def mode(self) -> DraftMode: ...
    @property
    def is_editing(self) -> bool: ...
    def get_task(self, task_id: str) -> Task | None: ...
    def __len__(self) -> int: ...
    def __iter__(self) -> Iterator[Task]: ...

    # Form fields
    def set_draft_title(self, text: str) -> None: ...
    def set_draft_description(self, text: str) -> None: ...

    # Mutations
    def add_task(self) -> Task | None: ...
    def start_editing(self, task_id: str) -> bool: ...
    def update_task(self) -> Task | None: ...
    def delete_task(self, task_id: str) -> bool: ...
    def cancel_editing(self) -> None: ...
