import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from channel_sidebar.rules.models import Rules

logger = logging.getLogger(__name__)


class DocumentValidationError(ValueError):
    """Raised when a YAML document does not match its expected schema."""

    def __init__(self, path: Path, error: ValidationError) -> None:
        self.path = path
        self.error = error
        super().__init__(f"Validation failed for {path}:\n{error}")


def read_yaml_document(path: Path) -> Any:
    """
    Read a YAML file, tolerating a single ```yaml fenced block.

    Raises FileNotFoundError if the file is missing.
    Raises ValueError if the YAML is invalid.
    """
    if not path.exists():
        raise FileNotFoundError(f"File not found at: {path}")

    content = path.read_text(encoding="utf-8")

    yaml_lines = []
    in_block = False
    found_block = False
    for line in content.splitlines():
        s_line = line.strip()
        if s_line.startswith("```yaml"):
            in_block = True
            found_block = True
            continue
        if in_block and s_line.startswith("```"):
            break
        if in_block:
            yaml_lines.append(line)

    clean_content = "\n".join(yaml_lines) if found_block else content

    try:
        return yaml.safe_load(clean_content)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in {path}: {e}") from e


def load_rules(path: Path) -> Rules:
    """
    Load and validate the rules file.

    An empty file yields the defaults (unlicensed, unrestricted).
    """
    data = read_yaml_document(path) or {}

    try:
        rules = Rules.model_validate(data)
    except ValidationError as e:
        raise DocumentValidationError(path, e) from e

    for name, value in rules.unknown_restriction_values().items():
        logger.warning(
            "Unknown restriction level %r for %s in %s; treating as unrestricted",
            value,
            name,
            path,
        )

    return rules
