"""Non-blocking advisory file locks.

POSIX uses ``fcntl.flock``, whose locks belong to the open file description,
so two separate ``open()`` calls conflict even inside one process. Windows
uses ``msvcrt.locking`` on the first byte of the file.
"""

from __future__ import annotations

import sys
from typing import IO

if sys.platform == "win32":
    import msvcrt

    def try_lock(handle: IO[bytes]) -> None:
        """Take an exclusive lock on *handle* or raise ``OSError``."""
        handle.seek(0)
        msvcrt.locking(handle.fileno(), msvcrt.LK_NBLCK, 1)

    def unlock(handle: IO[bytes]) -> None:
        handle.seek(0)
        msvcrt.locking(handle.fileno(), msvcrt.LK_UNLCK, 1)

else:
    import fcntl

    def try_lock(handle: IO[bytes]) -> None:
        """Take an exclusive lock on *handle* or raise ``OSError``."""
        fcntl.flock(handle.fileno(), fcntl.LOCK_EX | fcntl.LOCK_NB)

    def unlock(handle: IO[bytes]) -> None:
        fcntl.flock(handle.fileno(), fcntl.LOCK_UN)
