"""Content-style provider (Google Generative Language API)."""

from .client import GoogleProvider

__all__ = ["GoogleProvider"]
