"""
Codec component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ExportedFile:
    """A backup file ready to be written or downloaded."""

    filename: str
    content: bytes
    media_type: str = "application/json"
