"""Load and validate checkpoint configuration from YAML."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from .schema import CheckpointConfig

SECTION = "checkpoint"


def load_config(path: Path | str, section: str | None = SECTION) -> CheckpointConfig:
    """Read a YAML file and return a validated CheckpointConfig.

    The settings may sit at the top level of the file or, so that they can
    share an application's config file, under the *section* key. An empty
    file yields the defaults.
    """
    path = Path(path)
    with path.open("r", encoding="utf-8") as fh:
        raw = yaml.safe_load(fh)
    return CheckpointConfig.model_validate(_extract(raw, section, path))


def _extract(raw: Any, section: str | None, path: Path) -> dict[str, Any]:
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ValueError(f"{path}: expected a mapping, got {type(raw).__name__}")
    if section and section in raw:
        nested = raw[section]
        if nested is None:
            return {}
        if not isinstance(nested, dict):
            raise ValueError(f"{path}: section {section!r} must be a mapping")
        return nested
    return raw
