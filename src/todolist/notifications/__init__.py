"""
Notification subsystem.

Components:
- dispatcher.py: channel, permission gate and notification ids
- console.py: terminal notification host and session permission host
"""
