"""
QUIC Packet-Level Structures

Decoded views handed to the tracer by the protocol engine: packet headers,
stateless reset records and transport parameters.
"""

from dataclasses import dataclass, field
from typing import List

from ..constants import (
    PKT_FLAG_NONE,
    PKT_FLAG_LONG_FORM,
    STATELESS_RESET_TOKENLEN,
)


@dataclass
class PacketHeader:
    """
    Decoded QUIC packet header.

    `version` is only meaningful for long form headers.
    """
    type: int
    flags: int = PKT_FLAG_NONE
    conn_id: int = 0
    pkt_num: int = 0
    version: int = 0

    @property
    def is_long_form(self) -> bool:
        return bool(self.flags & PKT_FLAG_LONG_FORM)


@dataclass
class StatelessReset:
    """Stateless reset record: fixed-length token plus random padding."""
    stateless_reset_token: bytes
    rand: bytes = b""

    @property
    def randlen(self) -> int:
        return len(self.rand)


@dataclass
class TransportParameters:
    """
    QUIC Transport Parameters as negotiated during the handshake.

    Which of the context-specific fields is meaningful depends on the
    handshake message that carried them:
    - ClientHello: negotiated_version, initial_version
    - EncryptedExtensions: supported_versions, stateless_reset_token
    - NewSessionTicket: stateless_reset_token
    """
    initial_max_stream_data: int = 0
    initial_max_data: int = 0
    initial_max_stream_id: int = 0
    idle_timeout: int = 0
    omit_connection_id: bool = False
    max_packet_size: int = 65527

    # ClientHello
    negotiated_version: int = 0
    initial_version: int = 0

    # EncryptedExtensions
    supported_versions: List[int] = field(default_factory=list)

    stateless_reset_token: bytes = bytes(STATELESS_RESET_TOKENLEN)
