"""
QUIC Packet Structures
"""

from .types import (
    PacketHeader,
    StatelessReset,
    TransportParameters,
)
