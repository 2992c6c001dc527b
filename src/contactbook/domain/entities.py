"""Domain entities: Contact, plus the input rules shared by every layer."""

import re
from dataclasses import dataclass

# A phone is acceptable once it carries at least this many digit characters.
MIN_PHONE_DIGITS = 3

_NON_DIGIT = re.compile(r"\D")


def digits_of(phone: str | None) -> str:
    """Return only the digit characters of phone ("555-0101" -> "5550101")."""
    return _NON_DIGIT.sub("", phone or "")


@dataclass(frozen=True)
class Contact:
    """
    A single directory entry.
    The id is assigned once by the repository and never changes or gets reused.
    """

    id: str
    name: str
    phone: str

    def __post_init__(self):
        if not self.id:
            raise ValueError("Contact id must be non-empty.")
        name = (self.name or "").strip()
        if not name:
            raise ValueError("Contact name must be non-empty.")
        object.__setattr__(self, "name", name)
        if len(digits_of(self.phone)) < MIN_PHONE_DIGITS:
            raise ValueError(
                f"Contact phone must contain at least {MIN_PHONE_DIGITS} digits."
            )

    def to_record(self) -> dict[str, str]:
        """Plain dict in the persisted layout {id, name, phone}."""
        return {"id": self.id, "name": self.name, "phone": self.phone}

    @classmethod
    def from_record(cls, record: dict) -> "Contact":
        """Build a Contact from a persisted record. Raises ValueError/TypeError/KeyError on bad shape."""
        if not isinstance(record, dict):
            raise TypeError("Contact record must be an object.")
        values = {key: record[key] for key in ("id", "name", "phone")}
        for key, value in values.items():
            if not isinstance(value, str):
                raise TypeError(f"Contact record field '{key}' must be a string.")
        return cls(**values)
