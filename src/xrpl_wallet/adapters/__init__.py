"""Adapters wiring use cases to user-facing interfaces."""
