"""KeyValueStore implementation of ContactRepository.

The whole directory is one JSON array of {id, name, phone} objects under a single
key. Every operation reads that value fresh; every mutation is read-all, mutate,
write-all, since the store has no partial-update primitive. Nothing guards against
another process writing the same key: the last write wins.

Records that do not form a valid Contact (written by another version, edited by
hand) are hidden from list() but written back untouched, in place, by every
mutation. Only an unparseable value is treated as an empty directory.
"""

import itertools
import json
import logging
import threading
import uuid

from contactbook.application.errors import ContactNotFound, PersistenceError
from contactbook.application.ports import KeyValueStore
from contactbook.domain import Contact

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "contact-app-data"

# Process-local sequence appended to every new id.
_id_sequence = itertools.count(1)


def new_contact_id() -> str:
    """uuid4 hex plus a process-local counter: never repeats within a process."""
    return f"{uuid.uuid4().hex}-{next(_id_sequence)}"


def _record_id(entry) -> str | None:
    if isinstance(entry, Contact):
        return entry.id
    if isinstance(entry, dict) and isinstance(entry.get("id"), str):
        return entry["id"]
    return None


def _decode(raw: str, key: str) -> list:
    """Parse the stored value into Contacts and raw records that failed validation.

    Raises ValueError/TypeError when the value is not a JSON array.
    """
    records = json.loads(raw)
    if not isinstance(records, list):
        raise TypeError("stored directory must be a JSON array")
    entries: list = []
    seen: set[str] = set()
    for record in records:
        try:
            contact = Contact.from_record(record)
        except (ValueError, TypeError, KeyError) as e:
            logger.warning("Skipping invalid record under '%s': %s", key, e)
            entries.append(record)
            continue
        if contact.id in seen:
            logger.warning("Skipping duplicate id %s under '%s'", contact.id, key)
            entries.append(record)
            continue
        seen.add(contact.id)
        entries.append(contact)
    return entries


def _encode(entries: list) -> str:
    return json.dumps(
        [e.to_record() if isinstance(e, Contact) else e for e in entries],
        ensure_ascii=False,
    )


class KeyValueContactRepository:
    """Stores the directory in a KeyValueStore under storage_key. Order preserved by insertion."""

    def __init__(self, store: KeyValueStore, storage_key: str = DEFAULT_STORAGE_KEY) -> None:
        self._store = store
        self._key = storage_key
        self._write_lock = threading.Lock()

    @property
    def storage_key(self) -> str:
        return self._key

    def _read(self, *, strict: bool) -> list:
        """Read all stored entries. Absent or unparseable data is an empty directory.

        With strict=True a provider failure raises PersistenceError instead of
        reading as empty, so a mutation never writes over a store it could not read.
        """
        try:
            raw = self._store.get(self._key)
        except Exception as e:
            if strict:
                raise PersistenceError(f"read failed: {e}") from e
            logger.warning("Reading '%s' failed, treating directory as empty: %s", self._key, e)
            return []
        if raw is None:
            return []
        try:
            return _decode(raw, self._key)
        except (ValueError, TypeError) as e:
            logger.warning("Stored directory under '%s' is malformed, treating as empty: %s", self._key, e)
            return []

    def _write(self, entries: list) -> None:
        try:
            self._store.set(self._key, _encode(entries))
        except PersistenceError:
            raise
        except Exception as e:
            logger.error("Writing '%s' failed: %s", self._key, e)
            raise PersistenceError(str(e)) from e

    def list(self) -> list[Contact]:
        return [e for e in self._read(strict=False) if isinstance(e, Contact)]

    def add(self, name: str, phone: str) -> Contact:
        with self._write_lock:
            entries = self._read(strict=True)
            taken = {_record_id(e) for e in entries}
            new_id = new_contact_id()
            while new_id in taken:
                new_id = new_contact_id()
            contact = Contact(id=new_id, name=name, phone=phone)
            entries.append(contact)
            self._write(entries)
            logger.info("Added contact %s", contact.id)
            return contact

    def update(self, contact_id: str, name: str, phone: str) -> Contact:
        with self._write_lock:
            entries = self._read(strict=True)
            for idx, existing in enumerate(entries):
                if isinstance(existing, Contact) and existing.id == contact_id:
                    break
            else:
                raise ContactNotFound(contact_id)
            updated = Contact(id=contact_id, name=name, phone=phone)
            entries[idx] = updated
            self._write(entries)
            logger.info("Updated contact %s", contact_id)
            return updated

    def remove(self, contact_id: str) -> None:
        with self._write_lock:
            entries = self._read(strict=True)
            remaining = [
                e for e in entries if not (isinstance(e, Contact) and e.id == contact_id)
            ]
            self._write(remaining)
            if len(remaining) != len(entries):
                logger.info("Removed contact %s", contact_id)
