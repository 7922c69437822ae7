"""Tests for HerdRNG, the fused Herd fast path."""

from __future__ import annotations

import logging
import struct

import pytest

from mixrand.algorithms import HerdRandomness, SplitMixRandomness
from mixrand.algorithms.herd import seed_from_length
from mixrand.core.bits import MASK32, to_int32
from mixrand.herd_rng import HerdRNG
from mixrand.rng import RNG


class TestMatchesGenericFacade:
    """64-bit derived operations must agree with ``RNG(HerdRandomness(...))``."""

    @pytest.mark.parametrize("seed", [0, 17, [1, 2, 3]])
    def test_next_long(self, seed) -> None:
        fast, slow = HerdRNG(seed), RNG(HerdRandomness(seed))
        assert [fast.next_long() for _ in range(50)] == [slow.next_long() for _ in range(50)]

    def test_next_int_and_positive_int(self) -> None:
        fast, slow = HerdRNG(9), RNG(HerdRandomness(9))
        for _ in range(50):
            assert fast.next_int() == slow.next_int()
            assert fast.next_positive_int() == slow.next_positive_int()

    def test_next_double(self) -> None:
        fast, slow = HerdRNG(9), RNG(HerdRandomness(9))
        assert [fast.next_double() for _ in range(50)] == [slow.next_double() for _ in range(50)]

    def test_next_bounded_and_ranged_long(self) -> None:
        fast, slow = HerdRNG(21), RNG(HerdRandomness(21))
        for _ in range(50):
            assert fast.next_bounded_long(1000) == slow.next_bounded_long(1000)
            assert fast.next_ranged_long(-9, 9) == slow.next_ranged_long(-9, 9)

    def test_non_positive_bound(self) -> None:
        rng = HerdRNG(1)
        before = rng.export_state()
        assert rng.next_bounded_long(0) == 0
        assert rng.next_bounded_long(-5) == 0
        assert rng.next_bounded_long((1 << 63) + 1) == 0
        assert rng.export_state() == before


class TestFastPathSemantics:
    def test_bounded_int_uses_32_bit_word(self) -> None:
        rng, reference = HerdRNG(5), HerdRandomness(5)
        for _ in range(50):
            word = reference.next32() & MASK32
            assert rng.next_bounded_int(100) == to_int32((100 * (word & 0x7FFFFFFF)) >> 31)

    def test_ranged_int_containment(self) -> None:
        rng = HerdRNG(5)
        for _ in range(500):
            assert 3 <= rng.next_ranged_int(3, 9) < 9

    @pytest.mark.parametrize("length", [0, 1, 7, 100])
    def test_fill_bytes_four_per_word(self, length: int) -> None:
        reference = HerdRandomness(8)
        expected = b"".join(
            (reference.next32() & MASK32).to_bytes(4, "little")
            for _ in range((length + 3) // 4)
        )[:length]
        buf = bytearray(length)
        HerdRNG(8).fill_bytes(buf)
        assert bytes(buf) == expected

    def test_fill_bytes_none_rejected(self) -> None:
        rng = HerdRNG(8)
        before = rng.export_state()
        with pytest.raises(ValueError):
            rng.fill_bytes(None)
        assert rng.export_state() == before

    def test_fill_bytes_read_only_rejected(self) -> None:
        rng = HerdRNG(9)
        before = rng.export_state()
        with pytest.raises(ValueError, match="writable"):
            rng.fill_bytes(bytes(8))
        assert rng.export_state() == before

    def test_signed_double_range(self) -> None:
        rng = HerdRNG(44)
        values = [rng.next_signed_double() for _ in range(2000)]
        assert all(-1.0 <= v < 1.0 for v in values)
        assert min(values) < -0.5
        assert max(values) > 0.5

    def test_signed_double_is_rescaled_double(self) -> None:
        rng = HerdRNG.from_state([0] * 16, 0)
        ref = RNG(HerdRandomness.from_state([0] * 16, 0))
        for _ in range(100):
            assert rng.next_signed_double() == 2.0 * ref.next_double() - 1.0


class TestSnapshot:
    def test_seventeen_words(self) -> None:
        rng = HerdRNG(3)
        words = rng.export_state()
        assert len(words) == 17
        assert words[:16] == rng.rand.state
        assert words[16] == rng.rand.choice

    def test_words_match_byte_snapshot(self) -> None:
        rng = HerdRNG(3)
        rng.next_long()
        assert tuple(rng.export_state()) == struct.unpack("<17I", rng.rand.export_state())

    def test_roundtrip_resumes_sequence(self) -> None:
        rng = HerdRNG([9, 9, 9])
        rng.next_long()
        words = rng.export_state()
        expected = [rng.next_long() for _ in range(30)]
        restored = HerdRNG(0)
        restored.import_state(words)
        assert [restored.next_long() for _ in range(30)] == expected

    def test_short_snapshot_fallback(self, caplog: pytest.LogCaptureFixture) -> None:
        rng = HerdRNG(1)
        with caplog.at_level(logging.WARNING):
            rng.import_state([1, 2, 3])
        state, choice = seed_from_length(3)
        assert rng.export_state() == [*state, choice]
        assert "deriving state from length" in caplog.text

    def test_byte_snapshot_uses_byte_layout(self) -> None:
        source = HerdRandomness([4, 5])
        source.next32()
        rng = HerdRNG(0)
        rng.import_state(source.export_state())
        assert rng.export_state() == [*source.state, source.choice]
        assert rng.next_long() == source.next64()

    def test_none_snapshot_rejected(self) -> None:
        with pytest.raises(ValueError):
            HerdRNG(1).import_state(None)


class TestCopy:
    def test_copy_is_herd_rng_with_own_array(self) -> None:
        rng = HerdRNG(6)
        dup = rng.copy()
        assert isinstance(dup, HerdRNG)
        assert dup.rand.state is not rng.rand.state
        before = dup.export_state()
        for _ in range(20):
            rng.next_int()
        assert dup.export_state() == before

    def test_copy_replays(self) -> None:
        rng = HerdRNG(6)
        dup = rng.copy()
        assert [rng.next_long() for _ in range(20)] == [dup.next_long() for _ in range(20)]


class TestRandProperty:
    def test_rejects_other_algorithms(self) -> None:
        rng = HerdRNG(1)
        with pytest.raises(TypeError):
            rng.rand = SplitMixRandomness(1)

    def test_accepts_herd(self) -> None:
        rng = HerdRNG(1)
        replacement = HerdRandomness(2)
        rng.rand = replacement
        assert rng.rand is replacement
