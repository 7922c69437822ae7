"""Herd: sixteen 32-bit words stirred by a rotating ``choice`` index.

Each draw advances ``choice`` by a fixed odd increment, uses its low
four bits to pick the word to update and its high four bits to pick the
word mixed into it.  Exactly one word and ``choice`` change per draw.

The seeding helpers in this module are shared with ``HerdRNG``, the
fused facade in ``mixrand.herd_rng``.
"""

from __future__ import annotations

import logging
import struct
from typing import Sequence

from mixrand.core.bits import MASK32, rotl32, to_int32, to_int64
from mixrand.core.entropy import next_entropy
from mixrand.core.randomness import Randomness, require_snapshot

logger = logging.getLogger(__name__)

STATE_WORDS = 16

CHOICE_INCREMENT = 0x9CBC276D
STIR_CONSTANT = 0xBA3779D9
WIDEN_MULTIPLIER = 0x632AE59B69B3C209

_SEED_XOR = 0x13A5BA1D
_SCRAMBLE_GAMMA = 0x9E3779B9
_SCRAMBLE_CHOICE_GAMMA = 0x8D265FCD
_SCRAMBLE_MULTIPLIER = 277803737

_SNAPSHOT = struct.Struct("<17I")


# =====================================================================
# Seeding helpers
# =====================================================================

def _premix(seed: int) -> int:
    return rotl32(seed, 13) ^ _SEED_XOR


def _scramble(counter: int, gamma: int = _SCRAMBLE_GAMMA) -> tuple[int, int]:
    """Advance *counter* by *gamma* and scramble it into one word.

    Returns ``(new_counter, word)``.
    """
    counter = (counter + gamma) & MASK32
    p = counter
    p ^= p >> (4 + (p >> 28))
    p = (p * _SCRAMBLE_MULTIPLIER) & MASK32
    return counter, (p >> 22) ^ p


def seed_from_int(seed: int) -> tuple[list[int], int]:
    """Fill a fresh state from a single 32-bit seed.

    Returns ``(state, choice)``; ``choice`` is the sum of the words.
    """
    counter = _premix(seed)
    state = []
    choice = 0
    for _ in range(STATE_WORDS):
        counter, word = _scramble(counter)
        state.append(word)
        choice = (choice + word) & MASK32
    return state, choice


def seed_from_ints(seeds: Sequence[int]) -> tuple[list[int], int]:
    """Fill a fresh state from a sequence of 32-bit seeds.

    Every element runs one full scramble pass that is XORed into all
    sixteen words, so both the order and the number of elements change
    the result.  An empty sequence falls back to the constant-seeded
    scramble.
    """
    if not seeds:
        return seed_from_int(0)
    state = [0] * STATE_WORDS
    choice = 0
    running_sum = 0
    counter = 0
    for seed in seeds:
        running_sum = (running_sum + seed) & MASK32
        counter = (counter + _premix(running_sum)) & MASK32
        for i in range(STATE_WORDS):
            counter, word = _scramble(counter)
            state[i] ^= word
            choice = (choice + state[i]) & MASK32
    return state, choice


def seed_from_entropy() -> tuple[list[int], int]:
    """Fill a fresh state from the process-wide entropy source."""
    state = []
    choice = 0
    for i in range(STATE_WORDS):
        word = ((next_entropy() << (9 + i)) ^ next_entropy()) & MASK32
        state.append(word)
        choice = (choice + word) & MASK32
    return state, choice


def seed_from_length(length: int) -> tuple[list[int], int]:
    """Derive a state from the length of a truncated snapshot.

    Used whenever a snapshot is too short to restore; the result depends
    only on *length*.
    """
    counter = _premix(length)
    state = []
    for _ in range(STATE_WORDS):
        counter, word = _scramble(counter)
        state.append(word)
    _, choice = _scramble(counter, _SCRAMBLE_CHOICE_GAMMA)
    return state, choice


def herd_step(state: list[int], choice: int) -> tuple[int, int]:
    """Run one Herd transition on *state* in place.

    Returns ``(updated_word, new_choice)``; both are unsigned 32-bit.
    """
    choice = (choice + CHOICE_INCREMENT) & MASK32
    idx = choice & 15
    word = (state[idx] + (((state[choice >> 28] + STIR_CONSTANT) & MASK32) >> 1)) & MASK32
    state[idx] = word
    return word, choice


def widen(word: int, choice: int) -> int:
    """Turn an updated word and ``choice`` into a signed 64-bit draw."""
    return to_int64(word * WIDEN_MULTIPLIER - choice)


# =====================================================================
# HerdRandomness
# =====================================================================

class HerdRandomness(Randomness):
    """Sixteen-word generator with a rotating ``choice`` index.

    Parameters
    ----------
    seed:
        ``None`` seeds from the process-wide entropy source.  An ``int``
        is scrambled into all sixteen words.  A sequence of ints seeds the
        state one element at a time (see ``seed_from_ints``).

    Use ``from_state`` to restore an exact ``(state, choice)`` pair.
    """

    snapshot_size = 68

    def __init__(self, seed: int | Sequence[int] | None = None) -> None:
        if seed is None:
            self.state, self.choice = seed_from_entropy()
        elif isinstance(seed, int):
            self.state, self.choice = seed_from_int(seed)
        else:
            self.state, self.choice = seed_from_ints(seed)

    @classmethod
    def from_state(cls, state: Sequence[int], choice: int) -> HerdRandomness:
        """Build a generator holding a copy of *state* and *choice*.

        If *state* is not exactly sixteen words long the generator is
        seeded from entropy instead.
        """
        if state is None or len(state) != STATE_WORDS:
            logger.warning(
                "Herd state needs %d words, got %s; seeding from entropy",
                STATE_WORDS, None if state is None else len(state),
            )
            return cls()
        rand = cls.__new__(cls)
        rand.state = [word & MASK32 for word in state]
        rand.choice = choice & MASK32
        return rand

    # -- draws ---------------------------------------------------------------

    def next32(self) -> int:
        word, self.choice = herd_step(self.state, self.choice)
        return to_int32(word)

    def next64(self) -> int:
        word, self.choice = herd_step(self.state, self.choice)
        return widen(word, self.choice)

    # -- snapshots -----------------------------------------------------------

    def export_state(self) -> bytes:
        return _SNAPSHOT.pack(*self.state, self.choice)

    def import_state(self, snapshot: bytes) -> None:
        require_snapshot(snapshot)
        if len(snapshot) < self.snapshot_size:
            logger.warning(
                "Herd snapshot has %d bytes, expected %d; deriving state from length",
                len(snapshot), self.snapshot_size,
            )
            self.state, self.choice = seed_from_length(len(snapshot))
        else:
            *state, self.choice = _SNAPSHOT.unpack_from(snapshot)
            self.state = state

    def copy(self) -> HerdRandomness:
        return HerdRandomness.from_state(self.state, self.choice)

    def __repr__(self) -> str:
        return f"HerdRandomness(choice=0x{self.choice:08X})"
