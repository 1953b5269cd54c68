"""Value objects for body metrics domain."""

from .sex import Sex

__all__ = ["Sex"]
