"""Utility modules for ephemeral-pg."""

from .logging import setup_logging

__all__ = [
    "setup_logging",
]
