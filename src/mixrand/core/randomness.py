"""Base class for the raw bit-generation algorithms.

Every algorithm subclasses ``Randomness`` and implements the five
abstract methods.  The ``RNG`` facade only ever talks to this interface,
so a new algorithm plugs in without touching any derived-distribution
code.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class Randomness(ABC):
    """Raw source of 32- and 64-bit pseudo-random values with saveable state."""

    snapshot_size: int = 0
    """Length in bytes of the snapshot produced by ``export_state``."""

    @abstractmethod
    def next64(self) -> int:
        """Advance the state once and return 64 random bits.

        Returns
        -------
        int
            A signed 64-bit value; every bit is pseudo-random.
        """

    @abstractmethod
    def next32(self) -> int:
        """Advance the state once and return 32 random bits.

        Returns
        -------
        int
            A signed 32-bit value; every bit is pseudo-random.
        """

    @abstractmethod
    def export_state(self) -> bytes:
        """Return a snapshot that ``import_state`` can later restore.

        The snapshot is only meaningful to an instance of the same class.
        """

    @abstractmethod
    def import_state(self, snapshot: bytes) -> None:
        """Replace the current state with the one stored in *snapshot*.

        Parameters
        ----------
        snapshot:
            Bytes produced by ``export_state`` on an instance of the same
            class.  Input shorter than ``snapshot_size`` does not raise; a
            deterministic state is derived from its length instead.

        Raises
        ------
        ValueError
            If *snapshot* is ``None``.
        """

    @abstractmethod
    def copy(self) -> Randomness:
        """Return an independent instance with an identical state."""


def require_snapshot(snapshot: object) -> None:
    """Raise ``ValueError`` when a snapshot argument is missing."""
    if snapshot is None:
        raise ValueError("snapshot is required, got None")


def require_writable(buffer: object) -> None:
    """Raise ``ValueError`` unless *buffer* is a writable bytes-like object."""
    if buffer is None:
        raise ValueError("buffer is required, got None")
    if memoryview(buffer).readonly:
        raise ValueError(f"buffer must be writable, got read-only {type(buffer).__name__}")
