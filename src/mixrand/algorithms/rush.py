"""Rush: a two-word subtractive generator.

``state0`` walks down by a fixed odd decrement (a Weyl sequence with
period ``2**64``) and its high bits are multiplied into the running
accumulator ``state1``, which is the output.
"""

from __future__ import annotations

import logging
import struct

from mixrand.core.bits import to_int32, to_int64
from mixrand.core.entropy import next_entropy
from mixrand.core.randomness import Randomness, require_snapshot

logger = logging.getLogger(__name__)

K1 = -0x3943D8696D4A3B7D
K2 = -0x7CD6391461952C1D
DECREMENT = 0x61C8864680B583EB
MULTIPLIER = 0x632AE59B69B3C209

_SNAPSHOT = struct.Struct("<qq")


class RushRandomness(Randomness):
    """Two signed 64-bit words of state.

    Parameters
    ----------
    seed:
        A 64-bit seed spread over both words.  If ``None``, the generator
        is seeded through ``from_seeds`` with values from the process-wide
        entropy source.

    Use ``from_state`` to restore exact words and ``from_seeds`` to seed
    from three 32-bit values.
    """

    snapshot_size = 16

    def __init__(self, seed: int | None = None) -> None:
        if seed is None:
            seeded = RushRandomness.from_seeds(
                to_int32(next_entropy() << 15 ^ next_entropy()),
                to_int32(next_entropy() << 14 ^ next_entropy()),
                to_int32(next_entropy() << 16 ^ next_entropy()),
            )
            self.state0, self.state1 = seeded.state0, seeded.state1
        else:
            self.state0 = to_int64(seed * K1 + K2)
            self.state1 = to_int64(seed * K2 - K1)

    @classmethod
    def from_state(cls, state0: int, state1: int) -> RushRandomness:
        """Build a generator holding exactly *state0* and *state1*."""
        rand = cls.__new__(cls)
        rand.state0 = to_int64(state0)
        rand.state1 = to_int64(state1)
        return rand

    @classmethod
    def from_seeds(cls, seed0: int, seed1: int, seed2: int) -> RushRandomness:
        """Build a generator from three 32-bit seeds."""
        seed0, seed1, seed2 = to_int32(seed0), to_int32(seed1), to_int32(seed2)
        return cls.from_state(
            ((seed0 * 0xBF + to_int32(seed1 * seed2)) << 24) ^ K2,
            ((seed1 * K2) ^ (seed2 - K1)) - seed0 * DECREMENT,
        )

    # -- draws ---------------------------------------------------------------

    def next64(self) -> int:
        self.state0 = to_int64(self.state0 - DECREMENT)
        self.state1 = to_int64(self.state1 + (self.state0 >> 24) * MULTIPLIER)
        return self.state1

    def next32(self) -> int:
        return to_int32(self.next64())

    # -- snapshots -----------------------------------------------------------

    def export_state(self) -> bytes:
        return _SNAPSHOT.pack(self.state0, self.state1)

    def import_state(self, snapshot: bytes) -> None:
        require_snapshot(snapshot)
        length = len(snapshot)
        if length < self.snapshot_size:
            logger.warning(
                "Rush snapshot has %d bytes, expected %d; deriving state from length",
                length, self.snapshot_size,
            )
            self.state0 = to_int64(K1 + length * K2)
            self.state1 = to_int64(-K2 - length * K1)
        else:
            self.state0, self.state1 = _SNAPSHOT.unpack_from(snapshot)

    def copy(self) -> RushRandomness:
        return RushRandomness.from_state(self.state0, self.state1)

    def __repr__(self) -> str:
        return f"RushRandomness(state0={self.state0}, state1={self.state1})"
