from .memory import InMemoryStorage

__all__ = ["InMemoryStorage"]
