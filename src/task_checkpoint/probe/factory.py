"""Select an activity probe by name."""

from __future__ import annotations

from task_checkpoint.config.schema import ProbeKind
from task_checkpoint.probe.base import ActivityProbe
from task_checkpoint.probe.lock_probe import LockProbe
from task_checkpoint.probe.unlink_probe import UnlinkProbe


def create_probe(kind: ProbeKind | str = ProbeKind.LOCK) -> ActivityProbe:
    """Return a new probe for *kind*.

    Raises ValueError for an unknown kind.
    """
    kind = ProbeKind(kind)
    if kind == ProbeKind.LOCK:
        return LockProbe()
    elif kind == ProbeKind.UNLINK:
        return UnlinkProbe()
    else:
        raise ValueError(f"Unknown probe: {kind}")
