"""Infrastructure adapters: database, settings and logging."""
