"""File-backed marker telling processes that a piece of work is in progress.

A checkpoint owns the file ``<directory>/<name>.checkpoint``. Enabling it
creates the file and starts a waiter thread that keeps the file open until
the checkpoint is disabled. Other processes ask ``is_enabled()`` to find out
whether the work is already running somewhere.

Activity held by this instance is seen directly through its waiter. Activity
held elsewhere is seen only through the activity probe, whose reliability
depends on the platform: the default :class:`LockProbe` uses advisory file
locks and works on POSIX and Windows, while the legacy :class:`UnlinkProbe`
only detects other holders where open files cannot be deleted.
"""

from __future__ import annotations

import logging
import os
import threading
from numbers import Real
from pathlib import Path

from task_checkpoint.config.schema import CheckpointConfig
from task_checkpoint.core.errors import CancellationFailure, InvalidArgument, IOFailure
from task_checkpoint.core.waiter import Waiter
from task_checkpoint.probe.base import ActivityProbe
from task_checkpoint.probe.factory import create_probe
from task_checkpoint.probe.lock_probe import LockProbe
from task_checkpoint.utils.logging_setup import setup_logging

logger = logging.getLogger(__name__)

SUFFIX = ".checkpoint"


class Checkpoint:
    """Marks a named piece of work as running, across threads and processes."""

    def __init__(
        self,
        directory: str | os.PathLike[str],
        name: str,
        *,
        probe: ActivityProbe | None = None,
        ready_timeout: float = 5.0,
        join_timeout: float | None = None,
    ) -> None:
        if directory is None:
            raise InvalidArgument("Directory cannot be None")
        if not isinstance(name, str) or not name.strip():
            raise InvalidArgument("Name cannot be empty")
        if not _is_timeout(ready_timeout):
            raise InvalidArgument(f"ready_timeout must be positive, got {ready_timeout}")
        if join_timeout is not None and not _is_timeout(join_timeout):
            raise InvalidArgument(f"join_timeout must be positive, got {join_timeout}")
        try:
            self._directory = Path(directory)
        except TypeError as exc:
            raise InvalidArgument(f"Invalid directory: {directory!r}") from exc

        self._name = name
        self._path = self._directory / f"{name}{SUFFIX}"
        self._probe = probe if probe is not None else LockProbe()
        self._ready_timeout = ready_timeout
        self._join_timeout = join_timeout
        self._waiter: Waiter | None = None
        self._lock = threading.RLock()

    @classmethod
    def from_config(cls, config: CheckpointConfig, name: str) -> Checkpoint:
        """Build a checkpoint from *config* and apply its ``log_level``."""
        setup_logging(config.log_level)
        return cls(
            config.directory,
            name,
            probe=create_probe(config.probe),
            ready_timeout=config.ready_timeout,
            join_timeout=config.join_timeout,
        )

    @property
    def directory(self) -> Path:
        return self._directory

    @property
    def name(self) -> str:
        return self._name

    @property
    def path(self) -> Path:
        return self._path

    @property
    def probe(self) -> ActivityProbe:
        return self._probe

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def enable(self) -> None:
        """Create the checkpoint file and keep it open until ``disable()``.

        Does nothing if the checkpoint is already enabled, here or in
        another process.

        Raises:
            IOFailure: the file could not be replaced or created, or the
                probe refused the waiter its hold on the file.
            CancellationFailure: the waiter did not become ready in time.
        """
        with self._lock:
            if self.is_enabled():
                logger.debug("Checkpoint %s already enabled", self._path)
                return

            self._discard_waiter()
            self._prepare_file()

            waiter = Waiter(self._path, self._probe, self._name)
            self._waiter = waiter
            waiter.start()
            if not waiter.wait_ready(self._ready_timeout):
                waiter.release()
                raise CancellationFailure(
                    f"Waiter for {self._path} not ready after {self._ready_timeout}s"
                )
            if waiter.refused:
                waiter.join(self._join_timeout)
                self._waiter = None
                raise IOFailure(
                    f"Hold on {self._path} refused: {waiter.error}"
                ) from waiter.error
            logger.debug("Checkpoint %s enabled", self._path)

    def disable(self) -> None:
        """Release the waiter and delete the checkpoint file.

        Does nothing if this instance was never enabled.

        Raises:
            CancellationFailure: the waiter did not exit within ``join_timeout``.
            IOFailure: the file could not be deleted.
        """
        with self._lock:
            if self._waiter is None:
                return

            self._stop_waiter(self._waiter)
            self._waiter = None
            self.delete()
            logger.debug("Checkpoint %s disabled", self._path)

    def delete(self) -> None:
        """Remove the checkpoint file if present.

        Raises:
            IOFailure: the file exists but could not be removed.
        """
        if self._waiter is not None and self._waiter.is_alive():
            logger.warning("Deleting %s while its waiter still holds it", self._path)
        try:
            self._path.unlink(missing_ok=True)
        except OSError as exc:
            raise IOFailure(f"Cannot delete {self._path}: {exc}") from exc

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def exists(self) -> bool:
        return self._path.exists()

    def is_enabled(self) -> bool:
        """Return True if the checkpoint file is held open by anyone.

        The local waiter is checked first. Other holders are only visible
        through the probe, see the module docstring for the platform caveats.
        """
        if not self.exists():
            return False
        return self._has_parked_waiter() or self._probe.is_busy(self._path)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _has_parked_waiter(self) -> bool:
        return self._waiter is not None and self._waiter.parked

    def _prepare_file(self) -> None:
        try:
            self._path.unlink(missing_ok=True)
        except OSError as exc:
            raise IOFailure(f"Cannot remove stale {self._path}: {exc}") from exc
        try:
            self._path.touch(exist_ok=False)
        except FileExistsError:
            logger.debug("Checkpoint file %s recreated concurrently", self._path)
        except OSError as exc:
            raise IOFailure(f"Cannot create {self._path}: {exc}") from exc

    def _discard_waiter(self) -> None:
        # A waiter can outlive its file when delete() ran without disable()
        if self._waiter is None:
            return
        if self._waiter.is_alive():
            self._stop_waiter(self._waiter)
        self._waiter = None

    def _stop_waiter(self, waiter: Waiter) -> None:
        waiter.release()
        waiter.join(self._join_timeout)
        if waiter.is_alive():
            raise CancellationFailure(
                f"Waiter for {self._path} still running after {self._join_timeout}s"
            )

    def __enter__(self) -> Checkpoint:
        self.enable()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.disable()

    def __repr__(self) -> str:
        return f"Checkpoint(path={str(self._path)!r}, probe={self._probe!r})"


def _is_timeout(value: object) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool) and value > 0
