"""Tests for input validation and the Contact entity rules."""

import pytest

from contactbook.application import ValidationError, validate_contact_input
from contactbook.domain import Contact, digits_of


def test_digits_of_strips_everything_else():
    assert digits_of("+1 (202) 555-0101") == "12025550101"
    assert digits_of("abc") == ""
    assert digits_of(None) == ""


def test_valid_input_is_trimmed():
    assert validate_contact_input("  Ann  ", " 555-0101 ") == ("Ann", "555-0101")


def test_phone_kept_as_entered():
    _, phone = validate_contact_input("Ann", "(555) 01-01")
    assert phone == "(555) 01-01"


@pytest.mark.parametrize("name", ["", "   ", None])
def test_name_required(name):
    with pytest.raises(ValidationError, match="name required"):
        validate_contact_input(name, "12345")


@pytest.mark.parametrize("phone", ["", "1", "12", "a-1-b-2", None])
def test_phone_needs_three_digits(phone):
    with pytest.raises(ValidationError, match="at least 3 digits"):
        validate_contact_input("Ann", phone)


def test_three_digits_is_enough():
    assert validate_contact_input("Ann", "x1y2z3") == ("Ann", "x1y2z3")


def test_contact_rejects_empty_name():
    with pytest.raises(ValueError, match="name"):
        Contact(id="x", name="  ", phone="123")


def test_contact_rejects_short_phone():
    with pytest.raises(ValueError, match="phone"):
        Contact(id="x", name="Ann", phone="12")


def test_contact_record_round_trip():
    contact = Contact(id="x", name="Ann", phone="555")
    assert Contact.from_record(contact.to_record()) == contact
