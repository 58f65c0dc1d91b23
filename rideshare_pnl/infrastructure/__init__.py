"""Infrastructure adapters for persistence, settings and logging."""

__all__: list[str] = []
