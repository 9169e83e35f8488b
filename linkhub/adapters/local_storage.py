"""
Local filesystem key-value store.

Implements KeyValueStorePort with a single JSON file holding every key,
so the command line shares one storage "origin" per data directory.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from linkhub.core.ports.storage import StorageWriteError

logger = logging.getLogger(__name__)


class JsonFileKeyValueStore:
    """
    Key-value store backed by one JSON object on disk.

    Example: {base_path}/linkhub_storage.json -> {"linktree-data": "<document>"}
    """

    def __init__(self, path: str | Path, *, create_dirs: bool = True) -> None:
        """
        Initialize file store.

        Args:
            path: JSON file holding all keys
            create_dirs: Whether to create the parent directory if missing
        """
        self.path = Path(path)
        if create_dirs:
            self.path.parent.mkdir(parents=True, exist_ok=True)

    def _read_all(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Ignoring unreadable storage file {self.path}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Ignoring storage file {self.path}: not a JSON object")
            return {}
        return {k: v for k, v in data.items() if isinstance(v, str)}

    def _write_all(self, values: dict[str, str], key: str) -> None:
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(values, f, ensure_ascii=False)
            os.replace(tmp_path, self.path)
        except OSError as e:
            raise StorageWriteError(key, str(e)) from e

    def get(self, key: str) -> str | None:
        return self._read_all().get(key)

    def set(self, key: str, value: str) -> None:
        values = self._read_all()
        values[key] = value
        self._write_all(values, key)

    def remove(self, key: str) -> None:
        values = self._read_all()
        if values.pop(key, None) is not None:
            self._write_all(values, key)


def create_local_store(
    base_path: str | Path | None = None,
    *,
    file_name: str = "linkhub_storage.json",
    env_var: str = "LINKHUB_DATA_DIR",
    default_path: str = "./data",
) -> JsonFileKeyValueStore:
    """
    Factory function to create JsonFileKeyValueStore from config.

    Args:
        base_path: Explicit data directory (overrides env var)
        file_name: Storage file name inside the data directory
        env_var: Environment variable name for the data directory
        default_path: Default directory if not configured
    """
    if base_path is None:
        base_path = os.environ.get(env_var, default_path)

    return JsonFileKeyValueStore(Path(base_path) / file_name)
