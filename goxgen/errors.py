"""Error types raised while reading and lowering markup."""

from __future__ import annotations

from .nodes import NO_SOURCE_LOCATION, SourceLocation


class GoxgenError(Exception):
    """Base class for all goxgen errors."""

    pass


class UnsupportedTagShapeError(GoxgenError):
    """Raised when a markup tag name is neither an identifier nor a call.

    Carries the offending construct's node type and, when the upstream
    parser recorded one, its source location so the caller can report a
    diagnostic and skip just this node.
    """

    def __init__(self, construct: str, location: SourceLocation = NO_SOURCE_LOCATION):
        self.construct = construct
        self.location = location
        message = f"Unsupported tag shape: {construct}"
        if not location.is_unknown():
            message = f"{message} at {location}"
        super().__init__(message)


class MarkupDocumentError(GoxgenError):
    """Raised when a markup document or host expression snippet cannot be read."""

    pass
