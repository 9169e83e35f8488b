"""
Codec component - Backup document export and import.

Functional Core - bytes in, bytes out; no storage access.
"""

from __future__ import annotations

import json
from datetime import date
from typing import Any

from linkhub.components.validation import is_importable_document
from linkhub.core.errors import DocumentImportError
from linkhub.domain.entities import AppState

from .models import ExportedFile

DEFAULT_FILENAME_PREFIX = "linktree-backup"


def export_document(state: AppState) -> bytes:
    """Serialize state as pretty-printed UTF-8 JSON."""
    return json.dumps(state.to_document(), indent=2, ensure_ascii=False).encode("utf-8")


def export_filename(today: date, prefix: str = DEFAULT_FILENAME_PREFIX) -> str:
    """Backup file name for the given date, e.g. linktree-backup-2024-05-01.json."""
    return f"{prefix}-{today.isoformat()}.json"


def build_export(
    state: AppState,
    today: date,
    prefix: str = DEFAULT_FILENAME_PREFIX,
) -> ExportedFile:
    return ExportedFile(
        filename=export_filename(today, prefix),
        content=export_document(state),
    )


def import_document(data: bytes | str) -> dict[str, Any]:
    """
    Parse an uploaded backup.

    Returns the parsed document, ready for a shallow merge into state.

    Raises:
        DocumentImportError: reason "malformed" if the bytes are not JSON,
            "invalid_shape" if the JSON is not a backup document
    """
    if isinstance(data, bytes):
        try:
            text = data.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise DocumentImportError("malformed", str(e)) from e
    else:
        text = data.removeprefix("\ufeff")

    try:
        doc = json.loads(text)
    except json.JSONDecodeError as e:
        raise DocumentImportError("malformed", str(e)) from e

    if not is_importable_document(doc):
        raise DocumentImportError("invalid_shape")

    return doc
