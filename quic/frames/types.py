"""
QUIC Frame Structures

One dataclass per frame kind. Each carries its frame type as `type`;
STREAM and ACK also carry the low type bits in `flags`.
"""

from dataclasses import dataclass, field
from typing import ClassVar, List

from ..constants import (
    FRAME_PADDING,
    FRAME_RST_STREAM,
    FRAME_CONNECTION_CLOSE,
    FRAME_MAX_DATA,
    FRAME_MAX_STREAM_DATA,
    FRAME_MAX_STREAM_ID,
    FRAME_PING,
    FRAME_BLOCKED,
    FRAME_STREAM_BLOCKED,
    FRAME_STREAM_ID_BLOCKED,
    FRAME_NEW_CONNECTION_ID,
    FRAME_STOP_SENDING,
    FRAME_ACK,
    FRAME_STREAM,
    STATELESS_RESET_TOKENLEN,
)


@dataclass
class StreamFrame:
    type: ClassVar[int] = FRAME_STREAM
    stream_id: int
    offset: int = 0
    fin: bool = False
    data_length: int = 0
    flags: int = 0


@dataclass
class AckBlock:
    """Additional ACK block, relative to the previously decoded range."""
    gap: int
    block_length: int


@dataclass
class AckFrame:
    """
    ACK frame.

    Blocks are ordered by decreasing packet number, the first block being
    described by largest_ack and first_ack_block_length.
    """
    type: ClassVar[int] = FRAME_ACK
    largest_ack: int
    ack_delay: int = 0
    first_ack_block_length: int = 0
    blocks: List[AckBlock] = field(default_factory=list)
    flags: int = 0

    @property
    def num_blocks(self) -> int:
        return len(self.blocks)


@dataclass
class RstStreamFrame:
    type: ClassVar[int] = FRAME_RST_STREAM
    stream_id: int
    app_error_code: int = 0
    final_offset: int = 0


@dataclass
class ConnectionCloseFrame:
    type: ClassVar[int] = FRAME_CONNECTION_CLOSE
    error_code: int
    reason: bytes = b""

    @property
    def reason_length(self) -> int:
        return len(self.reason)


@dataclass
class MaxDataFrame:
    type: ClassVar[int] = FRAME_MAX_DATA
    max_data: int


@dataclass
class MaxStreamDataFrame:
    type: ClassVar[int] = FRAME_MAX_STREAM_DATA
    stream_id: int
    max_stream_data: int


@dataclass
class MaxStreamIdFrame:
    type: ClassVar[int] = FRAME_MAX_STREAM_ID
    max_stream_id: int


@dataclass
class PingFrame:
    type: ClassVar[int] = FRAME_PING


@dataclass
class BlockedFrame:
    type: ClassVar[int] = FRAME_BLOCKED


@dataclass
class StreamBlockedFrame:
    type: ClassVar[int] = FRAME_STREAM_BLOCKED
    stream_id: int


@dataclass
class StreamIdBlockedFrame:
    type: ClassVar[int] = FRAME_STREAM_ID_BLOCKED


@dataclass
class NewConnectionIdFrame:
    type: ClassVar[int] = FRAME_NEW_CONNECTION_ID
    seq: int
    conn_id: int
    stateless_reset_token: bytes = bytes(STATELESS_RESET_TOKENLEN)


@dataclass
class StopSendingFrame:
    type: ClassVar[int] = FRAME_STOP_SENDING
    stream_id: int
    app_error_code: int = 0


@dataclass
class PaddingFrame:
    type: ClassVar[int] = FRAME_PADDING
    length: int = 1


@dataclass
class UnknownFrame:
    """Frame whose type the engine could not classify."""
    type: int
