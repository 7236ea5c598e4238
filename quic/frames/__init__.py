"""
QUIC Frame Structures
"""

from .types import (
    StreamFrame,
    AckBlock,
    AckFrame,
    RstStreamFrame,
    ConnectionCloseFrame,
    MaxDataFrame,
    MaxStreamDataFrame,
    MaxStreamIdFrame,
    PingFrame,
    BlockedFrame,
    StreamBlockedFrame,
    StreamIdBlockedFrame,
    NewConnectionIdFrame,
    StopSendingFrame,
    PaddingFrame,
    UnknownFrame,
)
