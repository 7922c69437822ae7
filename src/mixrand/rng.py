"""Algorithm-agnostic random number facade.

``RNG`` wraps any ``Randomness`` and derives bounded integers, ranged
integers, doubles and byte fills from its raw 32- and 64-bit draws.
The derivations are written once here; the algorithms only supply bits.

Integer arguments and results follow fixed-width semantics: the
``*_long`` methods work on signed 64-bit values and the ``*_int``
methods on signed 32-bit values, wrapping on overflow.
"""

from __future__ import annotations

from mixrand.algorithms.splitmix import SplitMixRandomness
from mixrand.core.bits import INT32_MAX, INT64_MAX, MASK64, bits_to_double, to_int32, to_int64
from mixrand.core.randomness import Randomness, require_writable

_ONE_BITS = 0x3FF0000000000000


class RNG:
    """Random number generator built on a pluggable ``Randomness``.

    Parameters
    ----------
    source:
        A ``Randomness`` to draw bits from.  An ``int`` seeds a
        ``SplitMixRandomness``; ``None`` creates an entropy-seeded one.

    Instances are not thread-safe; use one per thread.
    """

    def __init__(self, source: Randomness | int | None = None) -> None:
        if isinstance(source, Randomness):
            self._rand = source
        else:
            self._rand = SplitMixRandomness(source)

    # -- public properties ---------------------------------------------------

    @property
    def rand(self) -> Randomness:
        """The ``Randomness`` this RNG draws from."""
        return self._rand

    @rand.setter
    def rand(self, value: Randomness) -> None:
        self._rand = value

    # -- integers ------------------------------------------------------------

    def next_long(self) -> int:
        """Return any signed 64-bit value."""
        return self._rand.next64()

    def next_bounded_long(self, max_value: int) -> int:
        """Return a uniform value in ``[0, max_value)``.

        *max_value* is taken as a signed 64-bit value; non-positive values
        return 0 without consuming a draw.
        Uses rejection sampling, so the result is unbiased.
        """
        max_value = to_int64(max_value)
        if max_value <= 0:
            return 0
        threshold = (INT64_MAX - max_value + 1) % max_value
        while True:
            bits = self._rand.next64() & INT64_MAX
            if bits >= threshold:
                return bits % max_value

    def next_ranged_long(self, min_value: int, max_value: int) -> int:
        """Return a uniform value in ``[min_value, max_value)``.

        If ``min_value >= max_value`` the result is ``min_value``.
        """
        return to_int64(self.next_bounded_long(to_int64(max_value - min_value)) + min_value)

    def next_int(self) -> int:
        """Return any signed 32-bit value."""
        return self._rand.next32()

    def next_positive_int(self) -> int:
        """Return a non-negative value with 31 random bits."""
        return self._rand.next32() & INT32_MAX

    def next_bounded_int(self, max_value: int) -> int:
        """Return a value between 0 (inclusive) and *max_value* (exclusive).

        *max_value* may be negative, giving a result in ``[max_value, 0]``.
        This scales 31 bits of one 64-bit draw (Lemire's multiply-shift)
        without a rejection step, so it is fast but very slightly biased
        for bounds that are not powers of two.  Use ``next_bounded_long``
        when exact uniformity matters.
        """
        return to_int32((max_value * (self._rand.next64() & INT32_MAX)) >> 31)

    def next_ranged_int(self, min_value: int, max_value: int) -> int:
        """Return a value between *min_value* (inclusive) and *max_value* (exclusive)."""
        return to_int32(self.next_bounded_int(to_int32(max_value - min_value)) + min_value)

    # -- floats and bytes ----------------------------------------------------

    def next_double(self) -> float:
        """Return a float in ``[0.0, 1.0)`` with 52 random bits."""
        return bits_to_double(_ONE_BITS, self._rand.next64()) - 1.0

    def fill_bytes(self, buffer: bytearray | memoryview) -> None:
        """Fill a writable *buffer* with random bytes, start to end.

        Each 64-bit draw supplies eight bytes, lowest byte first; a final
        partial word is truncated.

        Raises
        ------
        ValueError
            If *buffer* is ``None`` or read-only.  Nothing is drawn.
        """
        require_writable(buffer)
        length = len(buffer)
        for i in range(0, length, 8):
            word = (self._rand.next64() & MASK64).to_bytes(8, "little")
            n = min(8, length - i)
            buffer[i:i + n] = word[:n]

    def next_bytes(self, n: int) -> bytes:
        """Return *n* random bytes."""
        buffer = bytearray(n)
        self.fill_bytes(buffer)
        return bytes(buffer)

    # -- state ---------------------------------------------------------------

    def copy(self) -> RNG:
        """Return an RNG with the same algorithm and a copy of its state."""
        return RNG(self._rand.copy())

    def export_state(self) -> bytes:
        """Return a snapshot of the wrapped ``Randomness``."""
        return self._rand.export_state()

    def import_state(self, snapshot: bytes) -> None:
        """Restore a snapshot taken from the same kind of ``Randomness``."""
        self._rand.import_state(snapshot)

    # -- dunder helpers ------------------------------------------------------

    def __repr__(self) -> str:
        return f"RNG({self._rand!r})"
