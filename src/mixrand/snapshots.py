"""Saving and restoring generator state as JSON.

A ``SnapshotRecord`` stores which algorithm produced a snapshot and the
snapshot itself: hex text of the bytes for the ``Randomness`` algorithms,
or the list of seventeen words for ``HerdRNG``.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path

from pydantic import BaseModel, model_validator

from mixrand.algorithms import ALGORITHMS, algorithm_name
from mixrand.herd_rng import HerdRNG
from mixrand.rng import RNG

FUSED_HERD = "herd_fast"


class SnapshotRecord(BaseModel):
    """Serializable generator state."""

    algorithm: str
    """Registry name, or ``"herd_fast"`` for ``HerdRNG``."""
    state: str | list[int]
    """Hex-encoded snapshot bytes, or seventeen words for ``HerdRNG``."""
    created_at: str
    """ISO 8601 timestamp."""

    @model_validator(mode="after")
    def _validate_state_form(self) -> SnapshotRecord:
        if self.algorithm == FUSED_HERD:
            if not isinstance(self.state, list):
                raise ValueError("herd_fast snapshots must be a list of words")
        elif self.algorithm not in ALGORITHMS:
            raise ValueError(
                f"Unknown algorithm: {self.algorithm!r}. "
                f"Known algorithms: {[*ALGORITHMS.keys(), FUSED_HERD]}"
            )
        elif not isinstance(self.state, str):
            raise ValueError(f"{self.algorithm} snapshots must be hex text")
        return self

    @classmethod
    def capture(cls, rng: RNG) -> SnapshotRecord:
        """Record the current state of *rng*."""
        if isinstance(rng, HerdRNG):
            algorithm, state = FUSED_HERD, rng.export_state()
        else:
            algorithm, state = algorithm_name(rng.rand), rng.export_state().hex()
        return cls(
            algorithm=algorithm,
            state=state,
            created_at=datetime.now(timezone.utc).isoformat(),
        )

    def restore(self) -> RNG:
        """Build a new generator that continues from the recorded state."""
        # The placeholder seed is overwritten by the import.
        if self.algorithm == FUSED_HERD:
            rng = HerdRNG(0)
            rng.import_state(self.state)
            return rng
        rand = ALGORITHMS[self.algorithm](0)
        rand.import_state(bytes.fromhex(self.state))
        return RNG(rand)


def save_snapshot(record: SnapshotRecord, path: Path) -> None:
    """Save a snapshot record to a JSON file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(record.model_dump(), indent=2))


def load_snapshot(path: Path) -> SnapshotRecord:
    """Load a snapshot record from a JSON file."""
    data = json.loads(path.read_text())
    return SnapshotRecord.model_validate(data)
