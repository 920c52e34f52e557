"""Exceptions raised by the janken package."""

from __future__ import annotations


class JankenError(Exception):
    """Base class for janken errors."""


class InvalidHandError(JankenError, ValueError):
    """Raised when a hand is outside Rock/Scissors/Paper (1-3)."""

    def __init__(self, value: object):
        super().__init__(f"Invalid hand: {value!r} (expected 1, 2 or 3)")
        self.value = value


class ComfortImageUnavailable(JankenError):
    """Raised when a comfort image is requested without a lost round."""
