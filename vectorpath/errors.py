"""Typed errors raised by path algebra and shape construction."""

from __future__ import annotations


class GeometryError(Exception):
    """Base error for the library."""


class PreconditionViolation(GeometryError):
    """Degenerate input: too few sides, points or edges for the operation."""


class InvalidRange(PreconditionViolation):
    """Subdivision indices out of order or out of bounds."""


class DivisionByZero(GeometryError, ZeroDivisionError):
    """Normalising a zero-length vector."""
