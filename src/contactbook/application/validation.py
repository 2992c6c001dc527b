"""Input validation shared by the add and edit paths."""

from contactbook.application.errors import ValidationError
from contactbook.domain import MIN_PHONE_DIGITS, digits_of

NAME_REQUIRED = "name required"
PHONE_TOO_SHORT = f"phone must contain at least {MIN_PHONE_DIGITS} digits"


def validate_contact_input(name_raw: str | None, phone_raw: str | None) -> tuple[str, str]:
    """Return (name, phone) trimmed, or raise ValidationError.

    Name is checked before phone; the first failure wins.
    """
    name = (name_raw or "").strip()
    if not name:
        raise ValidationError(NAME_REQUIRED)
    phone = (phone_raw or "").strip()
    if len(digits_of(phone)) < MIN_PHONE_DIGITS:
        raise ValidationError(PHONE_TOO_SHORT)
    return name, phone
