"""
Packet Loss Simulator

Bernoulli trials against a pseudo-random source, for network simulation
harnesses deciding whether to drop a packet.
"""

import random
from typing import Optional


class LossSimulator:
    """
    Args:
        seed: Seed for a reproducible drop pattern (None seeds from the OS)
    """
    
    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)
    
    def seed(self, seed: Optional[int] = None) -> None:
        self._rng.seed(seed)
    
    def packet_lost(self, probability: float) -> bool:
        """Draw uniformly from [0, 1) and report a loss if below probability."""
        return self._rng.random() < probability


_default_simulator = LossSimulator()


def packet_lost(probability: float) -> bool:
    """packet_lost() against the process-wide simulator."""
    return _default_simulator.packet_lost(probability)


def seed(value: Optional[int] = None) -> None:
    """Reseed the process-wide simulator."""
    _default_simulator.seed(value)
