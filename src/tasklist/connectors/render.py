# src/tasklist/connectors/render.py

"""
Plain-text rendering of the task form and the task list.

Pure functions over snapshots: nothing here touches the store.
"""

from __future__ import annotations

from collections.abc import Sequence

from ..tasks.task_api import LIST_HEADING, form_actions, form_heading
from ..tasks.task_models import Draft, Task

ACTION_LABELS: dict[str, str] = {
    "add": "/add  Add Task",
    "update": "/update  Update",
    "cancel": "/cancel  Cancel",
}


def format_form(draft: Draft) -> str:
    lines = [
        f"== {form_heading(draft)} ==",
        f"  Title:       {draft.title}",
        f"  Description: {draft.description}",
        "  " + "   ".join(ACTION_LABELS[a] for a in form_actions(draft)),
    ]
    return "\n".join(lines)


def format_task(task: Task, number: int, *, show_id: bool = True, editing: bool = False) -> str:
    marker = "*" if editing else " "
    head = f"{marker}{number}. {task.title}"
    if show_id:
        head += f"  [{task.id}]"
    if task.description:
        return head + "\n     " + task.description
    return head


def format_task_list(
    tasks: Sequence[Task],
    *,
    show_ids: bool = True,
    editing_id: str | None = None,
) -> str:
    """Task list section; empty string when there is nothing to show."""
    if not tasks:
        return ""
    lines = [f"== {LIST_HEADING} =="]
    for number, task in enumerate(tasks, start=1):
        lines.append(
            format_task(task, number, show_id=show_ids, editing=task.id == editing_id)
        )
    return "\n".join(lines)


def format_screen(tasks: Sequence[Task], draft: Draft, *, show_ids: bool = True) -> str:
    parts = [format_form(draft)]
    listing = format_task_list(tasks, show_ids=show_ids, editing_id=draft.editing_id)
    if listing:
        parts.append(listing)
    return "\n\n".join(parts)
