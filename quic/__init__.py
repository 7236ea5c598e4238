"""
QUIC Protocol Structures

This package provides the decoded protocol structures the tracer renders:
- Protocol constants (packet types, frame types, error codes)
- Packet headers, stateless resets and transport parameters
- Frame dataclasses
- Stateless reset token derivation
"""

from .constants import *
