"""Classified render failures. A render either completes or raises one of these."""

from __future__ import annotations


class StarsetsError(Exception):
    """Base class for every error raised by the scene core."""


class InvalidBlockData(StarsetsError, ValueError):
    """The block cannot seed a scene (bad hash, zero gas limit, negative amounts)."""


class InvalidModifier(StarsetsError, ValueError):
    """A modifier is not a finite number or a colour is not ``#rrggbb``."""


class SequencingError(StarsetsError, RuntimeError):
    """A layer ran out of order or consumed an unexpected number of entropy draws."""
