"""Advisory-lock activity probe.

The waiter keeps an exclusive advisory lock on its open handle for as long as
the checkpoint is enabled. Any other process (or another instance in the same
process) tests for activity by trying to take the same lock on a fresh handle.
The probe never modifies the file.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO

from task_checkpoint.probe.locking import try_lock, unlock

logger = logging.getLogger(__name__)


class LockProbe:
    """Detects holders through exclusive, non-blocking file locks."""

    def hold(self, handle: IO[bytes]) -> None:
        try_lock(handle)

    def is_busy(self, path: Path) -> bool:
        try:
            handle = path.open("rb")
        except FileNotFoundError:
            return False
        except OSError as exc:
            logger.debug("Cannot open %s for probing: %s", path, exc)
            return True

        with handle:
            try:
                try_lock(handle)
            except OSError:
                return True
            unlock(handle)
        return False

    def __repr__(self) -> str:
        return "LockProbe()"
