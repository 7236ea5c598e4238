"""
QUIC Debug Tracer

Components:
- TraceClock: elapsed time prefix
- ColorTheme: direction-aware ANSI escapes
- names: packet/frame type and error code names
- frames / ack / bitfields: frame rendering and ACK range reconstruction
- packets: long/short header rendering
- params / events: transport parameters, version negotiation, stateless reset
- LossSimulator: packet drop decisions for simulation harnesses
- Tracer: the callback surface tying it all together
"""

from .clock import TraceClock
from .color import ColorTheme, Direction
from .ack import AckRangeLine, reconstruct_ack_ranges, acked_intervals
from .bitfields import BitField, STREAM_FLAG_FIELDS, ACK_FLAG_FIELDS, decompose
from .frames import format_frame
from .packets import format_packet
from .params import format_transport_params
from .loss import LossSimulator, packet_lost
from .tracer import Tracer

__all__ = [
    "Tracer",
    "TraceClock",
    "ColorTheme",
    "Direction",
    "AckRangeLine",
    "reconstruct_ack_ranges",
    "acked_intervals",
    "BitField",
    "STREAM_FLAG_FIELDS",
    "ACK_FLAG_FIELDS",
    "decompose",
    "format_frame",
    "format_packet",
    "format_transport_params",
    "LossSimulator",
    "packet_lost",
]
