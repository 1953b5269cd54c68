"""Configuration utilities for infrastructure layer."""

import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_PORT = 5000


def get_port() -> int:
    """
    Get HTTP listen port.

    Returns:
        Port from PORT env var, defaults to 5000
    """
    raw = os.getenv("PORT")
    if not raw:
        return DEFAULT_PORT
    return int(raw)


def get_host() -> str:
    """Get HTTP listen host (HOST env var, default 0.0.0.0)."""
    return os.getenv("HOST", "0.0.0.0")


def get_app_version() -> str:
    """Get application version (APP_VERSION env var, set at Docker build)."""
    return os.getenv("APP_VERSION", "0.0.0-dev")


def get_email_backend() -> str:
    """
    Get email backend type.

    Returns:
        'smtp' or 'inmemory' (EMAIL_BACKEND env var, default 'inmemory')
    """
    return os.getenv("EMAIL_BACKEND", "inmemory").lower()


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class SmtpSettings:
    """SMTP relay settings.

    Attributes:
        host: SMTP server host
        port: SMTP server port
        username: Login user (login skipped when unset)
        password: Login password
        use_tls: Whether to issue STARTTLS before login
        sender: Envelope/From address
        recipient: Inbox receiving contact messages
        timeout_s: Socket timeout in seconds
    """

    host: str
    port: int
    username: Optional[str]
    password: Optional[str]
    use_tls: bool
    sender: str
    recipient: str
    timeout_s: float = 10.0

    @property
    def has_credentials(self) -> bool:
        return bool(self.username and self.password)


def get_smtp_settings() -> SmtpSettings:
    """
    Read SMTP settings from environment.

    Environment Variables:
        SMTP_HOST, SMTP_PORT, SMTP_USERNAME, SMTP_PASSWORD, SMTP_USE_TLS,
        SMTP_TIMEOUT_S, EMAIL_FROM, CONTACT_RECIPIENT

    CONTACT_RECIPIENT defaults to EMAIL_FROM, so a single address is
    enough for a site owner writing to themselves.
    """
    sender = os.getenv("EMAIL_FROM", "noreply@localhost")
    return SmtpSettings(
        host=os.getenv("SMTP_HOST", "localhost"),
        port=int(os.getenv("SMTP_PORT", "587")),
        username=os.getenv("SMTP_USERNAME") or None,
        password=os.getenv("SMTP_PASSWORD") or None,
        use_tls=_env_flag("SMTP_USE_TLS", True),
        sender=sender,
        recipient=os.getenv("CONTACT_RECIPIENT") or sender,
        timeout_s=float(os.getenv("SMTP_TIMEOUT_S", "10")),
    )
