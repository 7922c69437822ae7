"""Shared fixtures for mixrand tests."""

from __future__ import annotations

from typing import Callable, Iterable

import pytest

from mixrand.core.entropy import reset_global_random
from mixrand.core.randomness import Randomness


class ScriptedRandomness(Randomness):
    """Randomness that replays a fixed list of 64-bit values, then repeats the last."""

    snapshot_size = 0

    def __init__(self, values: Iterable[int]) -> None:
        self.values = list(values)
        self.calls = 0

    def next64(self) -> int:
        value = self.values[min(self.calls, len(self.values) - 1)]
        self.calls += 1
        return value

    def next32(self) -> int:
        return self.next64()

    def export_state(self) -> bytes:
        return self.calls.to_bytes(8, "little")

    def import_state(self, snapshot: bytes) -> None:
        self.calls = int.from_bytes(snapshot, "little")

    def copy(self) -> ScriptedRandomness:
        dup = ScriptedRandomness(self.values)
        dup.calls = self.calls
        return dup


@pytest.fixture()
def scripted() -> Callable[..., ScriptedRandomness]:
    """Factory for ``ScriptedRandomness`` built from positional values."""
    def _make(*values: int) -> ScriptedRandomness:
        return ScriptedRandomness(values)
    return _make


@pytest.fixture()
def pinned_entropy():
    """Pin the process-wide entropy source for the duration of a test."""
    reset_global_random(20240601)
    yield
    reset_global_random()
