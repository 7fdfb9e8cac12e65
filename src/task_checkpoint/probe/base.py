"""Base protocol for checkpoint activity probes."""

from __future__ import annotations

from pathlib import Path
from typing import IO, Protocol, runtime_checkable


@runtime_checkable
class ActivityProbe(Protocol):
    """Protocol that all activity probes must implement.

    A probe answers whether some holder other than the local waiter has the
    checkpoint file open. It never sees the local waiter's state.
    """

    def hold(self, handle: IO[bytes]) -> None:
        """Claim the open *handle* on behalf of the waiter.

        Called once by the waiter before it signals readiness. May raise
        ``OSError`` if the claim is refused.
        """
        ...

    def is_busy(self, path: Path) -> bool:
        """Return True if another holder appears to have *path* open."""
        ...
