# src/tasklist/cli/commands.py

from __future__ import annotations

import contextlib
import inspect
import logging
from collections.abc import Callable
from typing import cast

from ..connectors.render import format_form, format_task_list
from ..core.state import AppState
from ..tasks.task_api import resolve_task_ref, run_intent, submit_form

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by connectors (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}
        self._raw_text: set[str] = set()

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
        raw_text: bool = False,
    ) -> None:
        """
        raw_text=True hands the handler the rest of the line untouched
        (a single argument, or none when empty) instead of split words.
        """
        aliases = aliases or []
        keys = [name.lower()] + [a.lower() for a in aliases]
        self._help[keys[0]] = help_text
        for key in keys:
            self._handlers[key] = handler
            if raw_text:
                self._raw_text.add(key)

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]
        if name in self._raw_text:
            rest = line[1:].lstrip().split(maxsplit=1)
            args = rest[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except Exception:
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, args, emit)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _show_ids(state: AppState) -> bool:
    return bool(getattr(state.settings, "show_ids", True))


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_status(state: AppState, args: list[str]) -> str:
    store = state.store
    draft = store.draft
    mode = f"EDITING {draft.editing_id}" if draft.is_editing else "COMPOSING"
    return (
        "Status:\n"
        f"  Mode: {mode}\n"
        f"  Tasks: {len(store)}"
    )


def _raw_arg(args: list[str]) -> str:
    return args[0] if args else ""


def cmd_title(state: AppState, args: list[str]) -> str:
    text = _raw_arg(args)
    run_intent(state, lambda: state.store.set_draft_title(text))
    return f"Title set: {text!r}"


def cmd_desc(state: AppState, args: list[str]) -> str:
    text = _raw_arg(args)
    run_intent(state, lambda: state.store.set_draft_description(text))
    return f"Description set: {text!r}"


def cmd_add(state: AppState, args: list[str]) -> str:
    """
    /add          -> add the drafted task
    /add <title>  -> set the title, then add
    """
    store = state.store
    if store.is_editing:
        return "Editing a task. Use /update to save or /cancel to discard."

    if args:
        text = _raw_arg(args)
        run_intent(state, lambda: store.set_draft_title(text))

    task = run_intent(state, store.add_task)
    if task is None:
        return "Title required."
    return f'Added "{task.title}".'


def cmd_update(state: AppState, args: list[str]) -> str:
    store = state.store
    if not store.is_editing:
        return "Not editing a task. Use /edit <id|#n> first."

    task = run_intent(state, store.update_task)
    if task is None:
        return "Title required."
    return f'Updated "{task.title}".'


def cmd_save(state: AppState, args: list[str]) -> str:
    """Add or update, depending on the form mode."""
    editing = state.store.is_editing
    task = submit_form(state)
    if task is None:
        return "Title required."
    return f'{"Updated" if editing else "Added"} "{task.title}".'


def cmd_edit(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    if len(args) != 1:
        return "Usage: /edit <id|#n>"

    task_id = resolve_task_ref(state, args[0])
    if task_id is None:
        return f"Task {args[0]} not found."

    store = state.store
    if store.is_editing and store.draft.editing_id != task_id and emit:
        with contextlib.suppress(Exception):
            emit("Unsaved changes to the previous task were discarded.")

    run_intent(state, lambda: store.start_editing(task_id))
    return f'Editing "{store.draft.title}". Use /update to save or /cancel to discard.'


def cmd_cancel(state: AppState, args: list[str]) -> str:
    run_intent(state, state.store.cancel_editing)
    return "Form cleared."


def cmd_rm(state: AppState, args: list[str]) -> str:
    if len(args) != 1:
        return "Usage: /rm <id|#n>"

    task_id = resolve_task_ref(state, args[0])
    if task_id is None:
        return f"Task {args[0]} not found."

    task = state.store.get_task(task_id)
    removed = run_intent(state, lambda: state.store.delete_task(task_id))
    if not removed or task is None:
        return f"Task {args[0]} not found."
    return f'Removed "{task.title}".'


def cmd_list(state: AppState, args: list[str]) -> str:
    store = state.store
    listing = format_task_list(
        store.tasks, show_ids=_show_ids(state), editing_id=store.draft.editing_id
    )
    return listing or "No tasks yet."


def cmd_draft(state: AppState, args: list[str]) -> str:
    return format_form(state.store.draft)


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("status", cmd_status, help_text="Show form mode and task count.")
registry.register(
    "title", cmd_title, help_text="Set the form title: /title <text>.", raw_text=True
)
registry.register(
    "desc",
    cmd_desc,
    help_text="Set the form description: /desc <text>.",
    aliases=["description"],
    raw_text=True,
)
registry.register("add", cmd_add, help_text="Add the drafted task: /add [title].", raw_text=True)
registry.register("edit", cmd_edit, help_text="Load a task into the form: /edit <id|#n>.")
registry.register("update", cmd_update, help_text="Save changes to the task being edited.")
registry.register("save", cmd_save, help_text="Add or update, depending on the form mode.")
registry.register("cancel", cmd_cancel, help_text="Discard the form and stop editing.")
registry.register("rm", cmd_rm, help_text="Delete a task: /rm <id|#n>.", aliases=["delete"])
registry.register("list", cmd_list, help_text="Show the task list.", aliases=["ls"])
registry.register("draft", cmd_draft, help_text="Show the form.")
