"""Logging setup for CLI runs."""

from .logging import configure_logging

__all__ = ["configure_logging"]
