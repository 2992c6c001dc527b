"""Errors raised by the repository and validation; the controller turns them into messages."""


class ContactbookError(Exception):
    """Base class for contactbook errors."""


class ValidationError(ContactbookError, ValueError):
    """User input rejected before it reaches the repository."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ContactNotFound(ContactbookError, LookupError):
    """No contact with the given id in the freshly read directory."""

    def __init__(self, contact_id: str) -> None:
        super().__init__(f"Contact not found: {contact_id}")
        self.contact_id = contact_id


class PersistenceError(ContactbookError):
    """The key-value provider failed to read or write."""
