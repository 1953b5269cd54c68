"""Ports for contact domain."""

from .email_sender import IEmailSender

__all__ = ["IEmailSender"]
