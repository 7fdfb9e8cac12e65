"""Background task that keeps a checkpoint file open until released."""

from __future__ import annotations

import logging
import threading
from pathlib import Path

from task_checkpoint.probe.base import ActivityProbe

logger = logging.getLogger(__name__)


class Waiter(threading.Thread):
    """Holds the checkpoint file open and parks on a condition.

    The waiter acknowledges readiness once the file is open, claimed by the
    probe, and the thread is parked. ``release()`` wakes it; it then closes
    the file and exits. Failures to open or claim the file are logged and
    recorded in ``error``, and readiness is still acknowledged so that the
    caller never blocks on a dead waiter. A claim refused by the probe sets
    ``refused``: some other holder has the file, which the caller must hear
    about.
    """

    def __init__(self, path: Path, probe: ActivityProbe, label: str) -> None:
        super().__init__(name=f"checkpoint-waiter:{label}", daemon=True)
        self._path = path
        self._probe = probe
        self._cond = threading.Condition()
        self._ready = threading.Event()
        self._released = False
        self._parked = False
        self.error: OSError | None = None
        self.refused = False

    @property
    def parked(self) -> bool:
        with self._cond:
            return self._parked

    def run(self) -> None:
        try:
            with self._path.open("rb") as handle:
                try:
                    self._probe.hold(handle)
                except OSError:
                    self.refused = True
                    raise
                with self._cond:
                    self._parked = True
                    self._ready.set()
                    while not self._released:
                        self._cond.wait()
                    self._parked = False
        except OSError as exc:
            self.error = exc
            logger.warning("Waiter for %s gave up: %s", self._path, exc)
        finally:
            self._ready.set()
        logger.debug("Waiter for %s closed the file", self._path)

    def wait_ready(self, timeout: float | None = None) -> bool:
        """Block until the waiter is parked or has given up."""
        return self._ready.wait(timeout)

    def release(self) -> None:
        with self._cond:
            self._released = True
            self._cond.notify_all()
