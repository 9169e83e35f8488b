"""
Validation component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LinkValidationIssue:
    """Link input validation issue."""

    code: str
    message: str
    field: str | None = None
