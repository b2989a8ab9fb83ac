"""
Input validation for register and login payloads.

Every failure maps to one fixed message per check, never a rule-specific one.
"""
import re
from typing import Any

from .errors import ValidationError, CREDENTIALS_REQUIRED_MESSAGE, WEAK_PASSWORD_MESSAGE
from .schemas import Credentials

MIN_PASSWORD_LENGTH = 8
SPECIAL_SYMBOLS = "!@#$%^&*()_+-=[]{};':\"\\|,.<>/?"

_ALPHA_RE = re.compile(r"[a-zA-Z]")
_DIGIT_RE = re.compile(r"[0-9]")
_SPECIAL_RE = re.compile("[" + re.escape(SPECIAL_SYMBOLS) + "]")


def validate_credentials(payload: Any) -> Credentials:
    """
    Check that the body carries non-empty string email and password.

    Raises:
        ValidationError: if either field is missing, empty or not a string,
            or the body is not a JSON object
    """
    if not isinstance(payload, dict):
        raise ValidationError(CREDENTIALS_REQUIRED_MESSAGE)

    email = payload.get("email")
    password = payload.get("password")
    if not email or not password or not isinstance(email, str) or not isinstance(password, str):
        raise ValidationError(CREDENTIALS_REQUIRED_MESSAGE)

    return Credentials(email=email, password=password)


def password_rule_failures(password: str) -> list:
    """Names of the strength rules the password breaks (all rules are evaluated)."""
    failures = []
    if len(password) < MIN_PASSWORD_LENGTH:
        failures.append("length")
    if not _ALPHA_RE.search(password):
        failures.append("alpha")
    if not _DIGIT_RE.search(password):
        failures.append("digit")
    if not _SPECIAL_RE.search(password):
        failures.append("special")
    return failures


def validate_password_strength(password: str) -> None:
    if password_rule_failures(password) or "\x00" in password:
        raise ValidationError(WEAK_PASSWORD_MESSAGE)
