"""Tests for the background waiter."""

from __future__ import annotations

from pathlib import Path

from task_checkpoint.core.waiter import Waiter
from task_checkpoint.probe.lock_probe import LockProbe
from task_checkpoint.probe.unlink_probe import UnlinkProbe


class TestWaiter:
    def test_parks_until_released(self, tmp_path: Path):
        path = tmp_path / "w.checkpoint"
        path.touch()
        waiter = Waiter(path, LockProbe(), "w")
        waiter.start()
        assert waiter.wait_ready(5)
        assert waiter.parked
        assert waiter.is_alive()
        assert LockProbe().is_busy(path)

        waiter.release()
        waiter.join(5)
        assert not waiter.is_alive()
        assert not waiter.parked
        assert not LockProbe().is_busy(path)
        assert waiter.error is None

    def test_release_before_start(self, tmp_path: Path):
        path = tmp_path / "w.checkpoint"
        path.touch()
        waiter = Waiter(path, UnlinkProbe(), "w")
        waiter.release()
        waiter.start()
        waiter.join(5)
        assert not waiter.is_alive()
        assert waiter.wait_ready(0)

    def test_missing_file_records_error(self, tmp_path: Path):
        waiter = Waiter(tmp_path / "gone.checkpoint", LockProbe(), "gone")
        waiter.start()
        assert waiter.wait_ready(5)
        waiter.join(5)
        assert isinstance(waiter.error, FileNotFoundError)
        assert not waiter.parked

    def test_thread_identity(self, tmp_path: Path):
        waiter = Waiter(tmp_path / "x.checkpoint", LockProbe(), "job-A")
        assert waiter.name == "checkpoint-waiter:job-A"
        assert waiter.daemon

    def test_release_is_idempotent(self, tmp_path: Path):
        path = tmp_path / "w.checkpoint"
        path.touch()
        waiter = Waiter(path, LockProbe(), "w")
        waiter.start()
        waiter.wait_ready(5)
        waiter.release()
        waiter.release()
        waiter.join(5)
        assert not waiter.is_alive()
