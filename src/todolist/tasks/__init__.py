"""
Task subsystem.

Components:
- task_models.py: data structures (TaskItem, AddResult) and timestamp formatting
- task_store.py: SQLite-backed storage (create / list_all / delete_by_id / update_description)
- task_controller.py: in-memory list that mirrors storage and mediates user actions
"""
