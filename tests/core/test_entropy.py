"""Tests for the process-wide entropy source."""

from __future__ import annotations

from mixrand.algorithms import HerdRandomness, RushRandomness, SplitMixRandomness
from mixrand.core.entropy import global_random, next_entropy, reset_global_random


class TestGlobalRandom:
    def test_same_instance_on_repeat_calls(self) -> None:
        assert global_random() is global_random()

    def test_reset_replaces_instance(self) -> None:
        before = global_random()
        reset_global_random()
        assert global_random() is not before

    def test_next_entropy_range(self) -> None:
        for _ in range(1000):
            value = next_entropy()
            assert 0 <= value < 0x7FFFFFFF


class TestUnseededConstruction:
    def test_pinned_source_makes_unseeded_repeatable(self, pinned_entropy) -> None:
        reset_global_random(99)
        first = (SplitMixRandomness().state, RushRandomness().export_state(), HerdRandomness().state)
        reset_global_random(99)
        second = (SplitMixRandomness().state, RushRandomness().export_state(), HerdRandomness().state)
        assert first == second

    def test_unseeded_instances_differ(self, pinned_entropy) -> None:
        assert SplitMixRandomness().state != SplitMixRandomness().state
        assert HerdRandomness().state != HerdRandomness().state
