"""
todolist: a single-screen console to-do list.

Tasks are stored in a local SQLite table, shown newest first, and every add or
delete fires a local notification.
"""
