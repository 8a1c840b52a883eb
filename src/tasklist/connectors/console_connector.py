# src/tasklist/connectors/console_connector.py

from __future__ import annotations

import logging
from datetime import datetime

from ..cli.commands import registry as command_registry
from ..core.state import AppState
from ..tasks.task_api import run_intent
from .render import format_screen

logger = logging.getLogger(__name__)

PROMPT = ">>> "


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}")


def _print_screen(state: AppState) -> None:
    store = state.store
    show_ids = bool(getattr(state.settings, "show_ids", True))
    print(format_screen(store.tasks, store.draft, show_ids=show_ids))


def run_console_loop(state: AppState) -> None:
    """
    Console front end: forwards each input line to the command registry.

    A line without a leading "/" is typed into the form's title field.
    """
    logger.info("Console connector started.")
    _print_ts("[CONSOLE] Type a title, or use /help for commands. Use /exit to quit.\n")
    _print_screen(state)

    def emit(text: str) -> None:
        print(f"[{_ts_local()}] {text}", flush=True)

    while True:
        try:
            raw_input = input(PROMPT)
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        user_input = raw_input.strip()
        if not user_input:
            continue

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        try:
            if user_input.startswith("/"):
                with state.lock:
                    cmd_response = command_registry.handle(state, user_input, emit=emit)
            else:
                # Plain text is the title field, kept exactly as typed.
                run_intent(state, lambda: state.store.set_draft_title(raw_input))
                cmd_response = None
        except Exception:
            logger.exception("Command handler crashed.")
            cmd_response = "Internal error while handling a command."

        if cmd_response is not None:
            _print_ts(cmd_response)
        print()
        _print_screen(state)

    logger.info("Console connector finished.")
