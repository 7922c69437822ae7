"""``HerdRNG``: the ``RNG`` facade fused with the Herd algorithm.

Skips the ``Randomness`` indirection by stepping the Herd state
directly, and adds a few operations that only make sense for Herd:

- ``next_bounded_int`` and ``fill_bytes`` consume 32-bit words rather
  than 64-bit draws, so their output differs from ``RNG(HerdRandomness())``.
- ``next_signed_double`` returns a float in ``[-1.0, 1.0)``.
- Snapshots are lists of seventeen 32-bit words (sixteen state words
  followed by ``choice``) instead of bytes.
"""

from __future__ import annotations

import logging
from typing import Sequence

from mixrand.algorithms.herd import (
    STATE_WORDS,
    HerdRandomness,
    herd_step,
    seed_from_length,
    widen,
)
from mixrand.core.bits import INT32_MAX, INT64_MAX, MASK32, bits_to_double, to_int32, to_int64
from mixrand.core.randomness import require_snapshot, require_writable
from mixrand.rng import RNG

logger = logging.getLogger(__name__)

_ONE_BITS = 0x3FF0000000000000
_TWO_BITS = 0x4000000000000000

SNAPSHOT_WORDS = STATE_WORDS + 1


class HerdRNG(RNG):
    """Fast RNG hard-wired to the Herd algorithm.

    Parameters
    ----------
    seed:
        Same forms as ``HerdRandomness``: ``None`` for entropy, an ``int``,
        or a sequence of ints.
    """

    def __init__(self, seed: int | Sequence[int] | None = None) -> None:
        super().__init__(HerdRandomness(seed))

    @classmethod
    def from_state(cls, state: Sequence[int], choice: int) -> HerdRNG:
        """Build a generator holding a copy of *state* and *choice*."""
        rng = cls.__new__(cls)
        RNG.__init__(rng, HerdRandomness.from_state(state, choice))
        return rng

    @property
    def rand(self) -> HerdRandomness:
        """The ``HerdRandomness`` holding this generator's state."""
        return self._rand

    @rand.setter
    def rand(self, value: HerdRandomness) -> None:
        if not isinstance(value, HerdRandomness):
            raise TypeError(f"HerdRNG requires HerdRandomness, got {type(value).__name__}")
        self._rand = value

    def _word(self) -> int:
        rand = self._rand
        word, rand.choice = herd_step(rand.state, rand.choice)
        return word

    def _long(self) -> int:
        rand = self._rand
        word, rand.choice = herd_step(rand.state, rand.choice)
        return widen(word, rand.choice)

    # -- integers ------------------------------------------------------------

    def next_long(self) -> int:
        return self._long()

    def next_bounded_long(self, max_value: int) -> int:
        max_value = to_int64(max_value)
        if max_value <= 0:
            return 0
        threshold = (INT64_MAX - max_value + 1) % max_value
        while True:
            bits = self._long() & INT64_MAX
            if bits >= threshold:
                return bits % max_value

    def next_int(self) -> int:
        return to_int32(self._word())

    def next_positive_int(self) -> int:
        return self._word() & INT32_MAX

    def next_bounded_int(self, max_value: int) -> int:
        """Scale 31 bits of one 32-bit word into ``[0, max_value)``."""
        return to_int32((max_value * (self._word() & INT32_MAX)) >> 31)

    # -- floats and bytes ----------------------------------------------------

    def next_double(self) -> float:
        return bits_to_double(_ONE_BITS, self._long()) - 1.0

    def next_signed_double(self) -> float:
        """Return a float in ``[-1.0, 1.0)`` with 52 random bits."""
        return bits_to_double(_TWO_BITS, self._long()) - 3.0

    def fill_bytes(self, buffer: bytearray | memoryview) -> None:
        """Fill *buffer* four bytes per 32-bit word, lowest byte first."""
        require_writable(buffer)
        length = len(buffer)
        for i in range(0, length, 4):
            word = self._word().to_bytes(4, "little")
            n = min(4, length - i)
            buffer[i:i + n] = word[:n]

    # -- state ---------------------------------------------------------------

    def copy(self) -> HerdRNG:
        return HerdRNG.from_state(self._rand.state, self._rand.choice)

    def export_state(self) -> list[int]:
        """Return the sixteen state words followed by ``choice``."""
        return [*self._rand.state, self._rand.choice]

    def import_state(self, snapshot: Sequence[int] | bytes) -> None:
        """Restore a seventeen-word snapshot from ``export_state``.

        Fewer than seventeen words derives a state from the length instead.
        A bytes-like snapshot is read as the 68-byte layout of
        ``HerdRandomness.export_state``.

        Raises
        ------
        ValueError
            If *snapshot* is ``None``.
        """
        require_snapshot(snapshot)
        if isinstance(snapshot, (bytes, bytearray, memoryview)):
            self._rand.import_state(bytes(snapshot))
            return
        rand = self._rand
        if len(snapshot) < SNAPSHOT_WORDS:
            logger.warning(
                "HerdRNG snapshot has %d words, expected %d; deriving state from length",
                len(snapshot), SNAPSHOT_WORDS,
            )
            rand.state, rand.choice = seed_from_length(len(snapshot))
        else:
            rand.state = [word & MASK32 for word in snapshot[:STATE_WORDS]]
            rand.choice = snapshot[STATE_WORDS] & MASK32

    def __repr__(self) -> str:
        return f"HerdRNG(choice=0x{self._rand.choice:08X})"
