"""
Business rules for user data.

Each check returns the list of violated rules (empty when the value is valid)
so services can report every problem at once.
"""

import re
from typing import List, Optional

from email_validator import validate_email, EmailNotValidError

NAME_MAX_LENGTH = 200
EMAIL_MAX_LENGTH = 255

_LETTER = re.compile(r"[^\W\d_]")
_DIGIT = re.compile(r"\d")


def normalize_email(email: str) -> str:
    """Trim and lower-case an email address before lookups and storage."""
    return email.strip().lower()


def name_violations(name: Optional[str]) -> List[str]:
    if name is None or not name.strip():
        return ["El nombre es obligatorio"]
    if len(name.strip()) > NAME_MAX_LENGTH:
        return [f"El nombre no puede superar {NAME_MAX_LENGTH} caracteres"]
    return []


def email_violations(email: Optional[str]) -> List[str]:
    if email is None or not email.strip():
        return ["El email es obligatorio"]
    if len(email) > EMAIL_MAX_LENGTH:
        return [f"El email no puede superar {EMAIL_MAX_LENGTH} caracteres"]
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError as e:
        return [f"Email inválido: {e}"]
    return []


def password_violations(password: Optional[str], min_length: int) -> List[str]:
    if password is None:
        return ["La contraseña es obligatoria"]
    errors = []
    if len(password) < min_length:
        errors.append(f"La contraseña debe tener al menos {min_length} caracteres")
    if not _LETTER.search(password):
        errors.append("La contraseña debe contener al menos una letra")
    if not _DIGIT.search(password):
        errors.append("La contraseña debe contener al menos un dígito")
    return errors
