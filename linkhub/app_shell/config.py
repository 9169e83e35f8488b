import os
from functools import lru_cache
from pathlib import Path

from linkhub.rules.loader import load_rules_or_default
from linkhub.rules.models import Rules


class Settings:
    """Environment-driven paths, with defaults for local use."""

    def __init__(self) -> None:
        self.base_dir = Path(os.getcwd())
        self.data_dir = Path(os.environ.get("LINKHUB_DATA_DIR", "./data"))
        # Web imports land here before being read; flet needs an absolute path
        self.upload_dir = Path(
            os.environ.get("LINKHUB_UPLOAD_DIR", str(self.data_dir / "uploads"))
        ).resolve()
        self.rules_path = Path(
            os.environ.get("LINKHUB_RULES_PATH", str(self.base_dir / "rules.yaml"))
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()


def load_configured_rules(rules_path: Path | None = None) -> Rules:
    """Rules from the given path or the configured one."""
    return load_rules_or_default(rules_path or get_settings().rules_path)
