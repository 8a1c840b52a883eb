"""In-memory task list manager: a task store plus a console front end."""

__version__ = "0.1.0"
