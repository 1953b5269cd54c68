"""Unit tests for environment configuration."""

from infrastructure.config import get_port, get_smtp_settings


def test_port_defaults_to_5000(monkeypatch):
    monkeypatch.delenv("PORT", raising=False)
    assert get_port() == 5000


def test_port_from_env(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    assert get_port() == 8080


def test_smtp_settings_defaults(monkeypatch):
    for k in ("SMTP_HOST", "SMTP_PORT", "SMTP_USERNAME", "SMTP_PASSWORD", "SMTP_USE_TLS"):
        monkeypatch.delenv(k, raising=False)
    monkeypatch.delenv("CONTACT_RECIPIENT", raising=False)
    monkeypatch.setenv("EMAIL_FROM", "site@example.com")

    settings = get_smtp_settings()

    assert settings.host == "localhost"
    assert settings.port == 587
    assert settings.use_tls is True
    assert settings.has_credentials is False
    assert settings.recipient == "site@example.com"


def test_smtp_settings_from_env(monkeypatch):
    monkeypatch.setenv("SMTP_HOST", "mail.example.com")
    monkeypatch.setenv("SMTP_PORT", "2525")
    monkeypatch.setenv("SMTP_USERNAME", "u")
    monkeypatch.setenv("SMTP_PASSWORD", "p")
    monkeypatch.setenv("SMTP_USE_TLS", "false")
    monkeypatch.setenv("CONTACT_RECIPIENT", "owner@example.com")

    settings = get_smtp_settings()

    assert settings.host == "mail.example.com"
    assert settings.port == 2525
    assert settings.use_tls is False
    assert settings.has_credentials is True
    assert settings.recipient == "owner@example.com"
