"""
Tests for frame rendering and flag byte decomposition.
"""

import pytest

from quic.constants import (
    FRAME_ERROR_MIN,
    FLOW_CONTROL_ERROR,
    STOPPING,
)
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
    UnknownFrame,
)
from tracer.bitfields import (
    STREAM_FLAG_FIELDS,
    ACK_FLAG_FIELDS,
    decompose,
    format_flags,
    stream_fin,
    stream_id_len_bits,
    stream_offset_len_bits,
    stream_has_data_length,
    ack_has_num_blocks,
    ack_largest_len_bits,
    ack_block_len_bits,
)
from tracer.color import ColorTheme, Direction
from tracer.frames import format_frame


@pytest.fixture
def plain():
    return ColorTheme(False)


def test_stream_flag_fields():
    assert decompose(0x3f, STREAM_FLAG_FIELDS) == [("F", 1), ("SS", 3), ("OO", 3), ("D", 1)]
    assert decompose(0x20, STREAM_FLAG_FIELDS) == [("F", 1), ("SS", 0), ("OO", 0), ("D", 0)]
    assert decompose(0x12, STREAM_FLAG_FIELDS) == [("F", 0), ("SS", 2), ("OO", 1), ("D", 0)]


def test_ack_flag_fields():
    assert decompose(0x1f, ACK_FLAG_FIELDS) == [("N", 1), ("LL", 3), ("MM", 3)]
    assert decompose(0x09, ACK_FLAG_FIELDS) == [("N", 0), ("LL", 2), ("MM", 1)]


def test_named_accessors():
    assert stream_fin(0x20) == 1
    assert stream_id_len_bits(0x18) == 3
    assert stream_offset_len_bits(0x04) == 2
    assert stream_has_data_length(0x01) == 1
    assert ack_has_num_blocks(0x10) == 1
    assert ack_largest_len_bits(0x0c) == 3
    assert ack_block_len_bits(0x02) == 2


def test_format_flags():
    assert format_flags(0x21, STREAM_FLAG_FIELDS) == "F=0x01 SS=0x00 OO=0x00 D=0x01"


def test_stream_frame(plain):
    fr = StreamFrame(stream_id=4, offset=1200, fin=True, data_length=87, flags=0x23)
    assert format_frame(fr, Direction.SEND, plain) == [
        "STREAM(0xe3) F=0x01 SS=0x00 OO=0x01 D=0x01",
        "stream_id=0x00000004 fin=1 offset=1200 data_length=87",
    ]


def test_padding_frame(plain):
    assert format_frame(PaddingFrame(length=937), Direction.SEND, plain) == [
        "PADDING(0x00)",
        "length=937",
    ]


def test_rst_stream_frame(plain):
    fr = RstStreamFrame(stream_id=8, app_error_code=STOPPING, final_offset=100)
    assert format_frame(fr, Direction.RECV, plain) == [
        "RST_STREAM(0x01)",
        "stream_id=0x00000008 app_error_code=STOPPING(0x00000000) final_offset=100",
    ]


def test_rst_stream_unknown_app_error(plain):
    fr = RstStreamFrame(stream_id=8, app_error_code=0x1234, final_offset=0)
    assert "app_error_code=UNKNOWN(0x00001234)" in format_frame(fr, Direction.RECV, plain)[1]


def test_connection_close_frame(plain):
    fr = ConnectionCloseFrame(error_code=FLOW_CONTROL_ERROR, reason=b"too much")
    assert format_frame(fr, Direction.RECV, plain) == [
        "CONNECTION_CLOSE(0x02)",
        "error_code=FLOW_CONTROL_ERROR(0x80000003) reason_length=8",
    ]


def test_connection_close_frame_error(plain):
    fr = ConnectionCloseFrame(error_code=FRAME_ERROR_MIN + 0x05)
    assert format_frame(fr, Direction.RECV, plain)[1] == \
        "error_code=FRAME_ERROR(0x80000105) reason_length=0"


def test_flow_control_frames(plain):
    assert format_frame(MaxDataFrame(2048), Direction.RECV, plain) == [
        "MAX_DATA(0x04)", "max_data=2048",
    ]
    assert format_frame(MaxStreamDataFrame(4, 524288), Direction.RECV, plain) == [
        "MAX_STREAM_DATA(0x05)", "stream_id=0x00000004 max_stream_data=524288",
    ]
    assert format_frame(MaxStreamIdFrame(199), Direction.RECV, plain) == [
        "MAX_STREAM_ID(0x06)", "max_stream_id=0x000000c7",
    ]


@pytest.mark.parametrize("fr, header", [
    (PingFrame(), "PING(0x07)"),
    (BlockedFrame(), "BLOCKED(0x08)"),
    (StreamIdBlockedFrame(), "STREAM_ID_BLOCKED(0x0a)"),
])
def test_frames_without_details(plain, fr, header):
    assert format_frame(fr, Direction.SEND, plain) == [header]


def test_stream_blocked_frame(plain):
    assert format_frame(StreamBlockedFrame(12), Direction.SEND, plain) == [
        "STREAM_BLOCKED(0x09)", "stream_id=0x0000000c",
    ]


def test_new_connection_id_frame(plain):
    fr = NewConnectionIdFrame(seq=1, conn_id=0xabc, stateless_reset_token=bytes(range(16)))
    assert format_frame(fr, Direction.RECV, plain) == [
        "NEW_CONNECTION_ID(0x0b)",
        "seq=1 conn_id=0x0000000000000abc "
        "stateless_reset_token=000102030405060708090a0b0c0d0e0f",
    ]


def test_stop_sending_frame(plain):
    fr = StopSendingFrame(stream_id=4, app_error_code=STOPPING)
    assert format_frame(fr, Direction.RECV, plain) == [
        "STOP_SENDING(0x0c)",
        "stream_id=0x00000004 app_error_code=STOPPING(0x00000000)",
    ]


def test_unknown_frame(plain):
    assert format_frame(UnknownFrame(0x1f), Direction.RECV, plain) == ["UNKNOWN(0x1f)"]


def test_frame_label_colored_by_direction():
    theme = ColorTheme(True)
    assert format_frame(PingFrame(), Direction.SEND, theme) == ["\033[1;35mPING\033[0m(0x07)"]
    assert format_frame(PingFrame(), Direction.RECV, theme) == ["\033[1;36mPING\033[0m(0x07)"]


def test_ack_header_folds_flags_into_type(plain):
    fr = AckFrame(largest_ack=1, flags=0x1f)
    assert format_frame(fr, Direction.SEND, plain)[0] == "ACK(0xbf) N=0x01 LL=0x03 MM=0x03"
