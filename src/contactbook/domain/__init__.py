"""Domain layer: entities and value rules. No dependencies on outer layers."""

from contactbook.domain.entities import MIN_PHONE_DIGITS, Contact, digits_of

__all__ = ["Contact", "MIN_PHONE_DIGITS", "digits_of"]
