"""Command-line interface."""

from .session import Session, Response

__all__ = ['Session', 'Response']
