"""
Codec component - Export state to a backup file and parse uploaded backups.
"""

from .component import (
    DEFAULT_FILENAME_PREFIX,
    build_export,
    export_document,
    export_filename,
    import_document,
)
from .models import ExportedFile

__all__ = [
    "export_document",
    "export_filename",
    "build_export",
    "import_document",
    "ExportedFile",
    "DEFAULT_FILENAME_PREFIX",
]
