"""
LinkHub error taxonomy.

Every error here is recoverable: callers surface it as a notification or log
it, and the in-memory state stays usable.
"""

from __future__ import annotations

from typing import Literal

ImportFailureReason = Literal["malformed", "invalid_shape"]


class LinkHubError(Exception):
    """Base class for LinkHub errors."""


class ValidationError(LinkHubError):
    """User input rejected (blank required field, malformed URL)."""

    def __init__(self, code: str, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.field = field


class LinkIndexError(LinkHubError, IndexError):
    """A link reference that no longer points at a link."""

    def __init__(self, ref: int | str, size: int) -> None:
        super().__init__(f"No link at {ref!r} (list has {size} links)")
        self.ref = ref
        self.size = size


class DocumentImportError(LinkHubError):
    """An uploaded document could not be used as application state."""

    def __init__(self, reason: ImportFailureReason, detail: str = "") -> None:
        message = {
            "malformed": "Document is not valid JSON",
            "invalid_shape": "Document does not look like a LinkHub backup",
        }[reason]
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.reason = reason
