"""Unit tests for email sender factory."""

import pytest

from infrastructure.email import (
    InMemoryEmailSender,
    SmtpEmailSender,
    create_email_sender,
    get_email_sender,
    reset_email_sender,
)


@pytest.fixture(autouse=True)
def _reset(monkeypatch):
    monkeypatch.delenv("EMAIL_BACKEND", raising=False)
    reset_email_sender()
    yield
    reset_email_sender()


def test_default_is_in_memory():
    assert isinstance(create_email_sender(), InMemoryEmailSender)


def test_smtp_backend(monkeypatch):
    monkeypatch.setenv("EMAIL_BACKEND", "SMTP")
    assert isinstance(create_email_sender(), SmtpEmailSender)


def test_unknown_backend_falls_back(monkeypatch):
    monkeypatch.setenv("EMAIL_BACKEND", "carrier-pigeon")
    assert isinstance(create_email_sender(), InMemoryEmailSender)


def test_singleton_and_reset():
    first = get_email_sender()
    assert get_email_sender() is first

    reset_email_sender()
    assert get_email_sender() is not first
