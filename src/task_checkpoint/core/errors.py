"""Exceptions raised by checkpoint operations."""

from __future__ import annotations


class CheckpointError(Exception):
    """Base class for all checkpoint errors."""


class InvalidArgument(CheckpointError, ValueError):
    """A checkpoint was constructed with a missing directory or blank name."""


class IOFailure(CheckpointError, OSError):
    """The filesystem refused to create or delete the checkpoint file."""


class CancellationFailure(CheckpointError):
    """Waiting for the background waiter did not complete."""
