"""
Task subsystem.

Components:
- task_models.py: data structures (Task, Draft, DraftMode)
- task_store.py: in-memory task list + form draft state machine
- task_api.py: form-level helpers used by commands and connectors
"""
