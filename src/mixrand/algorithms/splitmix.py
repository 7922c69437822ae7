"""SplitMix64: a single 64-bit counter passed through a strong mixer.

The counter advances by the golden-ratio increment on every draw, which
guarantees a full period of ``2**64``; the two multiply/xor-shift rounds
then decorrelate consecutive counter values.
"""

from __future__ import annotations

import logging

from mixrand.core.bits import MASK64, to_int32, to_int64
from mixrand.core.entropy import next_entropy
from mixrand.core.randomness import Randomness, require_snapshot

logger = logging.getLogger(__name__)

GOLDEN_GAMMA = 0x9E3779B97F4A7C15
_M1 = 0xBF58476D1CE4E5B9
_M2 = 0x94D049BB133111EB


class SplitMixRandomness(Randomness):
    """Counter-based 64-bit generator with one word of state.

    Parameters
    ----------
    seed:
        Any integer; it is reduced modulo ``2**64``, so negative seeds are
        fine.  If ``None``, the state is built from three values of the
        process-wide entropy source.
    """

    snapshot_size = 8

    def __init__(self, seed: int | None = None) -> None:
        if seed is None:
            seed = (
                next_entropy() >> 5
                ^ next_entropy() << 21
                ^ next_entropy() << 42
            )
        self.state = seed & MASK64

    # -- draws ---------------------------------------------------------------

    def _mix(self) -> int:
        self.state = (self.state + GOLDEN_GAMMA) & MASK64
        z = self.state
        z = ((z ^ (z >> 30)) * _M1) & MASK64
        z = ((z ^ (z >> 27)) * _M2) & MASK64
        return z ^ (z >> 31)

    def next64(self) -> int:
        return to_int64(self._mix())

    def next32(self) -> int:
        return to_int32(self._mix())

    # -- snapshots -----------------------------------------------------------

    def export_state(self) -> bytes:
        return self.state.to_bytes(8, "little")

    def import_state(self, snapshot: bytes) -> None:
        require_snapshot(snapshot)
        if len(snapshot) < self.snapshot_size:
            logger.warning(
                "SplitMix snapshot has %d bytes, expected %d; deriving state from length",
                len(snapshot), self.snapshot_size,
            )
            self.state = (-1 - len(snapshot) * 421) & MASK64
        else:
            self.state = int.from_bytes(snapshot[:8], "little")

    def copy(self) -> SplitMixRandomness:
        return SplitMixRandomness(self.state)

    def __repr__(self) -> str:
        return f"SplitMixRandomness(state=0x{self.state:016X})"
