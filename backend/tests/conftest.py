"""Shared test fixtures.

Loads the full app for every test under tests/, clears EMAIL_* and SMTP_*
env vars, and provides an in-memory sender override and an ASGI HTTP client.
"""

from __future__ import annotations

import os
from typing import Any, AsyncIterator, Generator, cast

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app import app
from infrastructure.email import InMemoryEmailSender, get_email_sender, reset_email_sender


@pytest.fixture(autouse=True)
def _clear_email_env() -> Generator[None, None, None]:
    """Pulisce variabili EMAIL_* e SMTP_* prima di ogni test.

    Evita che valori presenti in .env (es. EMAIL_BACKEND=smtp) facciano
    partire connessioni SMTP reali durante i test.
    """
    for k in list(os.environ):
        if k.startswith(("EMAIL_", "SMTP_")) or k == "CONTACT_RECIPIENT":
            del os.environ[k]
    reset_email_sender()
    yield
    reset_email_sender()
    app.dependency_overrides.clear()


@pytest.fixture
def email_sender() -> InMemoryEmailSender:
    """In-memory sender wired into the app via dependency override."""
    sender = InMemoryEmailSender()
    app.dependency_overrides[get_email_sender] = lambda: sender
    return sender


@pytest_asyncio.fixture
async def client() -> AsyncIterator[AsyncClient]:
    """Client HTTP asincrono per test REST.

    Usa httpx.AsyncClient con ASGITransport esplicito e base_url fittizia
    per coerenza nelle richieste relative.
    """
    transport = ASGITransport(app=cast(Any, app))
    async with AsyncClient(
        transport=transport,
        base_url="http://testserver",
    ) as ac:
        yield ac
