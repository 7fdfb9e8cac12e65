"""Pydantic v2 configuration models for checkpoints."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, PositiveFloat


class ProbeKind(str, Enum):
    LOCK = "lock"
    UNLINK = "unlink"


class CheckpointConfig(BaseModel):
    """Settings shared by the checkpoints of one application."""

    directory: Path = Path(".")
    probe: ProbeKind = ProbeKind.LOCK
    ready_timeout: PositiveFloat = 5.0
    join_timeout: PositiveFloat | None = None
    log_level: str = "INFO"
