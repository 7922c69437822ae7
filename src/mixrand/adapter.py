"""Adapter exposing an ``RNG`` through the standard ``random.Random`` API.

``RandomAdapter`` overrides the primitives ``random.Random`` builds on
(``random``, ``getrandbits``, ``seed``, ``getstate``, ``setstate``), so
everything derived from them (``randint``, ``choice``, ``shuffle``,
``sample``, ``gauss``, ...) runs on the wrapped algorithm.  The Mersenne
Twister state inherited from the base class is never used.
"""

from __future__ import annotations

import random
from typing import Any

from mixrand.core.bits import MASK64
from mixrand.rng import RNG


class RandomAdapter(random.Random):
    """``random.Random`` drawing from an ``RNG``.

    Parameters
    ----------
    rng:
        The generator to draw from.  If ``None``, an entropy-seeded
        ``RNG()`` is created.
    """

    def __init__(self, rng: RNG | None = None) -> None:
        self._rng = rng if rng is not None else RNG()
        self.gauss_next = None

    @property
    def rng(self) -> RNG:
        """The wrapped generator."""
        return self._rng

    # -- random.Random primitives --------------------------------------------

    def random(self) -> float:
        """Return a float in ``[0.0, 1.0)``."""
        return self._rng.next_double()

    def getrandbits(self, k: int) -> int:
        """Return a non-negative int with *k* random bits."""
        if k < 0:
            raise ValueError("number of bits must be non-negative")
        if k == 0:
            return 0
        words = (k + 63) // 64
        value = 0
        for i in range(words):
            value |= (self._rng.next_long() & MASK64) << (64 * i)
        return value >> (words * 64 - k)

    def randbytes(self, n: int) -> bytes:
        """Return *n* random bytes."""
        return self._rng.next_bytes(n)

    def seed(self, a: Any = None, version: int = 2) -> None:
        """Reseed with a fresh instance of the wrapped algorithm.

        ``None`` seeds from the process-wide entropy source; an ``int``
        seeds deterministically.

        Raises
        ------
        TypeError
            If *a* is neither ``None`` nor an ``int``.
        """
        if a is not None and not isinstance(a, int):
            raise TypeError(f"RandomAdapter seeds must be int or None, got {type(a).__name__}")
        self._rng.rand = type(self._rng.rand)(a)
        self.gauss_next = None

    def getstate(self) -> tuple[Any, float | None]:
        """Return the wrapped snapshot and the cached Gaussian value."""
        return self._rng.export_state(), self.gauss_next

    def setstate(self, state: tuple[Any, float | None]) -> None:
        """Restore a state returned by ``getstate``."""
        snapshot, self.gauss_next = state
        self._rng.import_state(snapshot)

    def __repr__(self) -> str:
        return f"RandomAdapter({self._rng!r})"
