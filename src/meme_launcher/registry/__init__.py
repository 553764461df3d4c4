"""Registry — хранилище записей Launch."""

from .store import InMemoryLaunchStore, LaunchStore

__all__ = [
    "InMemoryLaunchStore",
    "LaunchStore",
]
