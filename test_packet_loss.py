"""
Tests for the packet loss simulator.
"""

import pytest

from tracer import loss
from tracer.loss import LossSimulator
from tracer import Tracer


def test_zero_probability_never_drops():
    sim = LossSimulator(seed=1)
    assert not any(sim.packet_lost(0.0) for _ in range(10_000))


def test_full_probability_always_drops():
    sim = LossSimulator(seed=1)
    assert all(sim.packet_lost(1.0) for _ in range(10_000))


@pytest.mark.parametrize("seed", [0, 7, 12345])
def test_half_probability_rate(seed):
    sim = LossSimulator(seed=seed)
    trials = 100_000
    dropped = sum(sim.packet_lost(0.5) for _ in range(trials))
    assert abs(dropped / trials - 0.5) < 0.02


def test_seed_reproduces_drop_pattern():
    a = LossSimulator(seed=42)
    b = LossSimulator(seed=42)
    assert [a.packet_lost(0.3) for _ in range(200)] == [b.packet_lost(0.3) for _ in range(200)]


def test_reseed():
    sim = LossSimulator(seed=3)
    first = [sim.packet_lost(0.5) for _ in range(100)]
    sim.seed(3)
    assert [sim.packet_lost(0.5) for _ in range(100)] == first


def test_process_wide_simulator():
    loss.seed(99)
    assert not any(loss.packet_lost(0) for _ in range(10_000))
    assert all(loss.packet_lost(1) for _ in range(10_000))


def test_tracer_owns_its_simulator():
    a = Tracer(seed=5)
    b = Tracer(seed=5)
    assert [a.packet_lost(0.5) for _ in range(100)] == [b.packet_lost(0.5) for _ in range(100)]
