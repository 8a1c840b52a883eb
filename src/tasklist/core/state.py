# src/tasklist/core/state.py

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any

from .ports import TaskRepo


@dataclass
class AppState:
    # Settings object (config.Settings or a test double).
    settings: Any

    store: TaskRepo

    # Serializes user intents: each one runs to completion before the next.
    # Reentrant so a command handler may call task_api helpers while holding it.
    lock: threading.RLock = field(default_factory=threading.RLock)
