"""Infrastructure layer: concrete implementations of application ports."""

from contactbook.infrastructure.file_store import JsonFileKeyValueStore
from contactbook.infrastructure.kv_repository import (
    DEFAULT_STORAGE_KEY,
    KeyValueContactRepository,
)
from contactbook.infrastructure.memory_store import InMemoryKeyValueStore

__all__ = [
    "DEFAULT_STORAGE_KEY",
    "InMemoryKeyValueStore",
    "JsonFileKeyValueStore",
    "KeyValueContactRepository",
]
