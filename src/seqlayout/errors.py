from __future__ import annotations


class LayoutError(Exception):
    """Base class for every error raised by seqlayout."""


class InvalidGraphError(LayoutError, ValueError):
    """The graph handed to the engine is not a well-formed participant tree."""


class LayoutCancelledError(LayoutError, RuntimeError):
    """The layout context was cancelled before the engine finished."""
