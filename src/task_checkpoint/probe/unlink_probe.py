"""Legacy delete-and-recreate activity probe.

Tries to delete the checkpoint file and immediately recreates it. A refusal to
delete is read as "another holder has the file open". This only detects
anything on platforms that refuse to delete open files (Windows); on POSIX an
open file can be unlinked, so the probe always reports idle there.

The probe is destructive and not atomic: between the delete and the recreate
other observers can see the file missing. Prefer :class:`LockProbe`.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO

logger = logging.getLogger(__name__)


class UnlinkProbe:
    """Detects holders by attempting to delete the checkpoint file."""

    def hold(self, handle: IO[bytes]) -> None:
        # Keeping the handle open is the whole claim
        return None

    def is_busy(self, path: Path) -> bool:
        if not path.exists():
            return False
        try:
            path.unlink()
            path.touch(exist_ok=False)
        except OSError as exc:
            logger.debug("Delete/recreate of %s refused: %s", path, exc)
            return True
        return False

    def __repr__(self) -> str:
        return "UnlinkProbe()"
