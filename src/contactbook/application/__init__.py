"""Application layer: controller, ports, errors, and DTOs. Depends only on domain."""

from contactbook.application.directory_controller import DirectoryController
from contactbook.application.dto import Editing, EditSession, Idle, RenderModel
from contactbook.application.errors import (
    ContactbookError,
    ContactNotFound,
    PersistenceError,
    ValidationError,
)
from contactbook.application.ports import ContactRepository, KeyValueStore
from contactbook.application.validation import validate_contact_input

__all__ = [
    "ContactNotFound",
    "ContactRepository",
    "ContactbookError",
    "DirectoryController",
    "EditSession",
    "Editing",
    "Idle",
    "KeyValueStore",
    "PersistenceError",
    "RenderModel",
    "ValidationError",
    "validate_contact_input",
]
