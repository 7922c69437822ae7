"""Process-wide entropy source for unseeded construction.

Generators built without a seed pull a few values from one shared
``random.Random`` instance.  The instance is created on first use and
seeded by the interpreter from OS entropy.  Nothing here takes part in
any replay guarantee: only explicitly seeded generators are
reproducible.
"""

from __future__ import annotations

import logging
import random
import threading

from mixrand.core.bits import INT32_MAX

logger = logging.getLogger(__name__)

_lock = threading.Lock()
_global_random: random.Random | None = None


def global_random() -> random.Random:
    """Return the shared entropy source, creating it on first use."""
    global _global_random
    if _global_random is None:
        with _lock:
            if _global_random is None:
                logger.debug("Initialising process-wide entropy source")
                _global_random = random.Random()
    return _global_random


def next_entropy() -> int:
    """Return a non-negative value below ``2**31 - 1`` from the shared source."""
    return global_random().randrange(INT32_MAX)


def reset_global_random(seed: int | None = None) -> None:
    """Replace the shared source.

    With a *seed*, unseeded construction becomes repeatable, which is
    mostly useful in tests.  With ``None`` a fresh OS-seeded source is
    installed.
    """
    global _global_random
    with _lock:
        _global_random = random.Random(seed)
