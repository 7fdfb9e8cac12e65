"""Shared test fixtures."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from task_checkpoint.core.checkpoint import Checkpoint

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def config_path() -> Path:
    return FIXTURES_DIR / "config_test.yaml"


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


@pytest.fixture
def checkpoint_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "checkpoints"
    directory.mkdir()
    return directory


@pytest.fixture
def checkpoint(checkpoint_dir: Path):
    cp = Checkpoint(checkpoint_dir, "cp-test")
    yield cp
    cp.disable()
    cp.delete()
