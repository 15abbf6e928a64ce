"""
Client-side form checks for the employee editor.

The API only checks that name, email and position are present; these
stricter format rules live on the client side alone.
"""
import re
from typing import Any

EMAIL_RE = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9-]+(?:\.[A-Za-z0-9-]+)*\.[A-Za-z]{2,}")

# 123-456-7890, (123) 456-7890, 123.456.7890, 1234567890, +1-123-456-7890
PHONE_RE = re.compile(r"(?:\+\d{1,3}[-\s]?)?(?:\(\d{3}\)|\d{3})[-.\s]?\d{3}[-.\s]?\d{4}", re.ASCII)

NAME_RE = re.compile(r"[a-zA-Z\u00C0-\u024F\s'-]+")


def validate_email(email: str | None) -> bool:
    if not email:
        return False
    return EMAIL_RE.fullmatch(email) is not None


def validate_phone(phone: str | None) -> bool:
    # optional field
    if not phone:
        return True
    return PHONE_RE.fullmatch(phone) is not None


def validate_name(name: str | None) -> bool:
    if not name or not name.strip():
        return False
    return NAME_RE.fullmatch(name) is not None


def validate_required(value: Any) -> bool:
    """False only for None or a blank string; 0, False, [] and {} count as values."""
    if value is None:
        return False
    if isinstance(value, str) and value.strip() == "":
        return False
    return True
