"""Core ports, shared application state and user-facing strings."""
