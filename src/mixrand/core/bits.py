"""Fixed-width integer helpers.

Python integers are unbounded, so every generator keeps its state inside
a fixed width by masking after each arithmetic step.  These helpers
centralise the masks and the two's-complement reinterpretation used to
turn unsigned words into the signed values the draw methods return.
"""

from __future__ import annotations

import struct

MASK32 = 0xFFFFFFFF
MASK64 = 0xFFFFFFFFFFFFFFFF

INT32_MAX = 0x7FFFFFFF
INT64_MAX = 0x7FFFFFFFFFFFFFFF

_DOUBLE_MANTISSA = 0x000FFFFFFFFFFFFF


def to_int32(value: int) -> int:
    """Wrap *value* to a signed 32-bit integer."""
    value &= MASK32
    return value - 0x100000000 if value & 0x80000000 else value


def to_int64(value: int) -> int:
    """Wrap *value* to a signed 64-bit integer."""
    value &= MASK64
    return value - 0x10000000000000000 if value & 0x8000000000000000 else value


def rotl32(value: int, shift: int) -> int:
    """Rotate an unsigned 32-bit word left by *shift* bits."""
    value &= MASK32
    return ((value << shift) | (value >> (32 - shift))) & MASK32


def bits_to_double(exponent_bits: int, bits: int) -> float:
    """OR the low 52 bits of *bits* into the mantissa of *exponent_bits*.

    ``exponent_bits`` is the IEEE-754 pattern of a power of two (``1.0`` is
    ``0x3FF0000000000000``); the result lies in ``[x, 2x)`` for that value.
    """
    pattern = exponent_bits | (bits & _DOUBLE_MANTISSA)
    return struct.unpack("<d", struct.pack("<Q", pattern))[0]
