"""Small shared helpers."""

from .text import truncate_utf8

__all__ = ["truncate_utf8"]
