"""Application ports (interfaces). Implemented by infrastructure adapters."""

from typing import Protocol

from contactbook.domain import Contact


class KeyValueStore(Protocol):
    """String key-value storage. Both operations may raise on provider failure."""

    def get(self, key: str) -> str | None:
        """Return the value stored under key, or None if nothing was ever stored."""
        ...

    def set(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""
        ...


class ContactRepository(Protocol):
    """CRUD over the persisted, insertion-ordered directory of contacts."""

    def list(self) -> list[Contact]:
        """Return all contacts in insertion order; [] when nothing is stored or data is unreadable."""
        ...

    def add(self, name: str, phone: str) -> Contact:
        """Append a new contact with a fresh id and persist. Input must be pre-validated."""
        ...

    def update(self, contact_id: str, name: str, phone: str) -> Contact:
        """Replace name and phone in place. Raises ContactNotFound if the id is absent."""
        ...

    def remove(self, contact_id: str) -> None:
        """Delete the contact if present. Deleting an absent id is not an error."""
        ...
