"""Infrastructure adapters for remote services, settings, and logging."""
