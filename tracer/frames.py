"""
Frame Renderer

Renders one frame as a header line followed by indented detail lines.
Lines are returned without indentation or newlines; the Tracer adds both.
"""

from typing import List

from quic.constants import STATELESS_RESET_TOKENLEN
from quic.frames import (
    StreamFrame,
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
)
from utils.hexdump import format_hex

from .ack import ack_frame_ranges, format_ack_range_lines
from .bitfields import STREAM_FLAG_FIELDS, ACK_FLAG_FIELDS, format_flags
from .color import ColorTheme, Direction
from .names import frame_type_name, error_code_name, app_error_code_name


def format_frame_header(fr, direction: Direction, theme: ColorTheme) -> str:
    """
    Frame header line: colored type name, type byte and, for STREAM and
    ACK, the flag bits folded into the type byte.
    """
    label = f"{theme.frame(direction)}{frame_type_name(fr.type)}{theme.end()}"

    if isinstance(fr, StreamFrame):
        return f"{label}(0x{fr.type | fr.flags:02x}) {format_flags(fr.flags, STREAM_FLAG_FIELDS)}"
    if isinstance(fr, AckFrame):
        return f"{label}(0x{fr.type | fr.flags:02x}) {format_flags(fr.flags, ACK_FLAG_FIELDS)}"
    return f"{label}(0x{fr.type:02x})"


def format_frame_details(fr) -> List[str]:
    """Detail lines for a frame (may be empty)."""
    if isinstance(fr, StreamFrame):
        return [f"stream_id=0x{fr.stream_id:08x} fin={int(fr.fin)} "
                f"offset={fr.offset} data_length={fr.data_length}"]

    if isinstance(fr, PaddingFrame):
        return [f"length={fr.length}"]

    if isinstance(fr, AckFrame):
        lines = [f"num_blks={fr.num_blocks} largest_ack={fr.largest_ack} "
                 f"ack_delay={fr.ack_delay}"]
        lines.extend(format_ack_range_lines(ack_frame_ranges(fr)))
        return lines

    if isinstance(fr, RstStreamFrame):
        return [f"stream_id=0x{fr.stream_id:08x} "
                f"app_error_code={app_error_code_name(fr.app_error_code)}(0x{fr.app_error_code:08x}) "
                f"final_offset={fr.final_offset}"]

    if isinstance(fr, ConnectionCloseFrame):
        return [f"error_code={error_code_name(fr.error_code)}(0x{fr.error_code:08x}) "
                f"reason_length={fr.reason_length}"]

    if isinstance(fr, MaxDataFrame):
        return [f"max_data={fr.max_data}"]

    if isinstance(fr, MaxStreamDataFrame):
        return [f"stream_id=0x{fr.stream_id:08x} max_stream_data={fr.max_stream_data}"]

    if isinstance(fr, MaxStreamIdFrame):
        return [f"max_stream_id=0x{fr.max_stream_id:08x}"]

    if isinstance(fr, (PingFrame, BlockedFrame, StreamIdBlockedFrame)):
        return []

    if isinstance(fr, StreamBlockedFrame):
        return [f"stream_id=0x{fr.stream_id:08x}"]

    if isinstance(fr, NewConnectionIdFrame):
        token = format_hex(fr.stateless_reset_token, STATELESS_RESET_TOKENLEN)
        return [f"seq={fr.seq} conn_id=0x{fr.conn_id:016x} stateless_reset_token={token}"]

    if isinstance(fr, StopSendingFrame):
        return [f"stream_id=0x{fr.stream_id:08x} "
                f"app_error_code={app_error_code_name(fr.app_error_code)}(0x{fr.app_error_code:08x})"]

    # Unknown frame: header only
    return []


def format_frame(fr, direction: Direction, theme: ColorTheme) -> List[str]:
    """Header line followed by detail lines."""
    return [format_frame_header(fr, direction, theme)] + format_frame_details(fr)
