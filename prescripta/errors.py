"""
prescripta.errors
=================

Exception hierarchy.  Every error raised by the package derives from
:class:`PrescriptaError` and, where it makes sense, from the builtin a
caller would naturally catch (``ValueError`` / ``KeyError``).
"""

from __future__ import annotations


class PrescriptaError(Exception):
    """Base class for all package errors."""


class InvalidDate(PrescriptaError, ValueError):
    """Date text that cannot be parsed as ``DD/MM/YYYY``."""

    def __init__(self, text: str) -> None:
        super().__init__(f"invalid date {text!r} (expected DD/MM/YYYY)")
        self.text = text


class EventNotFound(PrescriptaError, KeyError):
    """No procedural event with the requested id."""

    def __init__(self, event_id: str) -> None:
        super().__init__(event_id)
        self.event_id = event_id

    def __str__(self) -> str:
        return f"unknown event {self.event_id!r}"


class InsufficientData(PrescriptaError):
    """Not enough dated information to project a timeline."""
