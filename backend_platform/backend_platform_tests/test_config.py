"""Tests for settings loading and startup requirements."""
import pytest
from pydantic import ValidationError

from backend_platform.backend_platform.auth_service.config import Settings, get_settings
from backend_platform.backend_platform.auth_service.main import create_app


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    # Keep a developer's .env or shell from leaking into these tests
    monkeypatch.chdir(tmp_path)
    for name in ("JWT_SECRET", "PORT", "EMAIL_CASE_SENSITIVE", "BCRYPT_ROUNDS"):
        monkeypatch.delenv(name, raising=False)


def test_missing_jwt_secret_fails():
    with pytest.raises(ValidationError):
        get_settings()


def test_empty_jwt_secret_fails(monkeypatch):
    monkeypatch.setenv("JWT_SECRET", "")
    with pytest.raises(ValidationError):
        get_settings()


def test_create_app_without_secret_fails():
    with pytest.raises(ValidationError):
        create_app()


def test_defaults(monkeypatch):
    monkeypatch.setenv("JWT_SECRET", "from-env")
    settings = get_settings()
    assert settings.JWT_SECRET == "from-env"
    assert settings.PORT == 8000
    assert settings.BCRYPT_ROUNDS == 10
    assert settings.ACCESS_TOKEN_EXPIRE_MINUTES == 60
    assert settings.JWT_ALGORITHM == "HS256"
    assert settings.EMAIL_CASE_SENSITIVE is True
    assert settings.LOG_DIR is None


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("JWT_SECRET", "from-env")
    monkeypatch.setenv("PORT", "9000")
    monkeypatch.setenv("EMAIL_CASE_SENSITIVE", "false")
    settings = get_settings()
    assert settings.PORT == 9000
    assert settings.EMAIL_CASE_SENSITIVE is False


def test_env_file(tmp_path):
    (tmp_path / ".env").write_text("JWT_SECRET=from-dotenv\nPORT=8123\n")
    settings = Settings()
    assert settings.JWT_SECRET == "from-dotenv"
    assert settings.PORT == 8123
