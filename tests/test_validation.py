import pytest

from app.ui.validation import validate_email, validate_name, validate_phone, validate_required


@pytest.mark.parametrize("email", [
    "user@example.com",
    "name.lastname@domain.co.uk",
    "user+tag@domain.org",
    "user.name@company-domain.com",
])
def test_valid_emails(email):
    assert validate_email(email) is True


@pytest.mark.parametrize("email", [
    "",
    None,
    "plaintext",
    "missing@domain",
    "@domain.com",
    "user@.com",
    "user@domain.",
    "user@domain..com",
    "user@domain.c",
])
def test_invalid_emails(email):
    assert validate_email(email) is False


@pytest.mark.parametrize("phone", [
    "",
    "123-456-7890",
    "(123) 456-7890",
    "123.456.7890",
    "1234567890",
    "+1-123-456-7890",
])
def test_valid_phones(phone):
    assert validate_phone(phone) is True


@pytest.mark.parametrize("phone", [
    "123",
    "abcdefghij",
    "123-45-7890",
    "123-4567-890",
    "(123-456-7890",
    "١٢٣-٤٥٦-٧٨٩٠",
    "١٢٣٤٥٦٧٨٩٠",
])
def test_invalid_phones(phone):
    assert validate_phone(phone) is False


@pytest.mark.parametrize("name", ["John", "Jane Doe", "MarÃ­a RodrÃ­guez", "O'Connor", "Smith-Johnson"])
def test_valid_names(name):
    assert validate_name(name) is True


@pytest.mark.parametrize("name", ["", "   ", "123", "John123", "@John"])
def test_invalid_names(name):
    assert validate_name(name) is False


@pytest.mark.parametrize("value", ["text", 0, False, [], {}])
def test_required_accepts_values(value):
    assert validate_required(value) is True


@pytest.mark.parametrize("value", ["", None, "   "])
def test_required_rejects_blank(value):
    assert validate_required(value) is False
