"""
Contactbook core: clean-architecture layout.

- domain: Contact entity and input rules. No outer dependencies.
- application: DirectoryController, ports (KeyValueStore, ContactRepository), errors, DTOs.
- infrastructure: adapters (KeyValueContactRepository, InMemoryKeyValueStore, JsonFileKeyValueStore).
"""

from contactbook.application import (
    ContactbookError,
    ContactNotFound,
    ContactRepository,
    DirectoryController,
    Editing,
    EditSession,
    Idle,
    KeyValueStore,
    PersistenceError,
    RenderModel,
    ValidationError,
)
from contactbook.domain import Contact
from contactbook.infrastructure import (
    InMemoryKeyValueStore,
    JsonFileKeyValueStore,
    KeyValueContactRepository,
)

__all__ = [
    "Contact",
    "ContactNotFound",
    "ContactRepository",
    "ContactbookError",
    "DirectoryController",
    "EditSession",
    "Editing",
    "Idle",
    "InMemoryKeyValueStore",
    "JsonFileKeyValueStore",
    "KeyValueContactRepository",
    "KeyValueStore",
    "PersistenceError",
    "RenderModel",
    "ValidationError",
]
