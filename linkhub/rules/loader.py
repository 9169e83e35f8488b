import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from linkhub.rules.models import Rules

logger = logging.getLogger(__name__)

FENCE_OPEN = "```yaml"
FENCE_CLOSE = "```"


def _yaml_body(content: str) -> str:
    """Body of the first ```yaml fenced block, or the whole text if there is none."""
    body: list[str] = []
    in_block = False
    for line in content.splitlines():
        stripped = line.strip()
        if not in_block:
            in_block = stripped.startswith(FENCE_OPEN)
            continue
        if stripped.startswith(FENCE_CLOSE):
            return "\n".join(body)
        body.append(line)
    return "\n".join(body) if in_block else content


def load_rules(path: Path) -> Rules:
    """
    Load and validate the rules file.
    Raises FileNotFoundError if file missing.
    Raises ValueError if the YAML or the schema is invalid.
    """
    if not path.exists():
        raise FileNotFoundError(f"Rules file not found at: {path}")

    with open(path, encoding="utf-8") as f:
        content = f.read()

    try:
        data = yaml.safe_load(_yaml_body(content))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in rules file: {e}") from e

    try:
        return Rules.model_validate(data or {})
    except ValidationError as e:
        raise ValueError(f"Rules validation failed:\n{e}") from e


def load_rules_or_default(path: Path) -> Rules:
    """Load rules, falling back to built-in defaults when the file is absent."""
    try:
        return load_rules(path)
    except FileNotFoundError:
        logger.warning(f"Rules file {path} not found, using built-in defaults")
        return Rules()
