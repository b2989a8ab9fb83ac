import pytest

from backend_platform.backend_platform.auth_service.errors import (
    ValidationError,
    CREDENTIALS_REQUIRED_MESSAGE,
    WEAK_PASSWORD_MESSAGE,
)
from backend_platform.backend_platform.auth_service.validators import (
    SPECIAL_SYMBOLS,
    password_rule_failures,
    validate_credentials,
    validate_password_strength,
)


def test_validate_credentials_returns_fields():
    credentials = validate_credentials({"email": "a@x.com", "password": "anything"})
    assert credentials.email == "a@x.com"
    assert credentials.password == "anything"


def test_validate_credentials_ignores_extra_fields():
    credentials = validate_credentials({"email": "a@x.com", "password": "pw", "name": "A"})
    assert credentials.email == "a@x.com"


@pytest.mark.parametrize("payload", [
    None,
    "a@x.com",
    [],
    {"email": None, "password": "pw"},
    {"email": "a@x.com", "password": None},
    {"email": 1.5, "password": "pw"},
    {"email": "a@x.com", "password": {"value": "pw"}},
])
def test_validate_credentials_rejects(payload):
    with pytest.raises(ValidationError) as exc_info:
        validate_credentials(payload)
    assert exc_info.value.message == CREDENTIALS_REQUIRED_MESSAGE
    assert exc_info.value.status_code == 400


def test_password_rules_all_evaluated():
    assert password_rule_failures("") == ["length", "alpha", "digit", "special"]
    assert password_rule_failures("abc") == ["length", "digit", "special"]
    assert password_rule_failures("Password123!") == []


@pytest.mark.parametrize("symbol", list(SPECIAL_SYMBOLS))
def test_every_special_symbol_counts(symbol):
    assert password_rule_failures("Passw0rd" + symbol) == []


def test_symbols_outside_the_set_do_not_count():
    assert password_rule_failures("Passw0rd~") == ["special"]
    assert password_rule_failures("Passw0rd ") == ["special"]


def test_non_ascii_letters_do_not_count_as_alphabetic():
    assert "alpha" in password_rule_failures("éééé1234!")


def test_non_ascii_digits_do_not_count_as_digits():
    assert password_rule_failures("Password\u0663!") == ["digit"]


@pytest.mark.parametrize("password", ["Pass1!", "1234567!", "Password!", "Password123", "        ", "Passw0rd!\x00x"])
def test_validate_password_strength_single_message(password):
    with pytest.raises(ValidationError) as exc_info:
        validate_password_strength(password)
    assert exc_info.value.message == WEAK_PASSWORD_MESSAGE


def test_validate_password_strength_accepts_minimum():
    validate_password_strength("abcdef1!")
