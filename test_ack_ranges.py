"""
Tests for ACK range reconstruction and ACK frame rendering.
"""

import logging

from quic.constants import MAX_PKT_NUM
from quic.frames import AckBlock, AckFrame
from tracer.ack import reconstruct_ack_ranges, acked_intervals, format_ack_range_lines
from tracer.color import ColorTheme, Direction
from tracer.frames import format_frame


def test_first_block_only():
    fr = AckFrame(largest_ack=100, first_ack_block_length=10)
    assert acked_intervals(fr) == [(100, 90)]


def test_first_block_shown_when_bounds_equal():
    lines = reconstruct_ack_ranges(100, 0, [])
    assert len(lines) == 1
    assert (lines[0].high, lines[0].low) == (100, 100)
    assert format_ack_range_lines(lines) == ["first_ack_block_length=0; [100..100]"]


def test_gap_moves_cursor_past_boundary():
    fr = AckFrame(largest_ack=100, first_ack_block_length=0,
                  blocks=[AckBlock(gap=2, block_length=5)])
    assert acked_intervals(fr) == [(100, 100), (97, 93)]


def test_zero_length_block_has_no_interval():
    fr = AckFrame(largest_ack=100, first_ack_block_length=10,
                  blocks=[AckBlock(gap=3, block_length=0), AckBlock(gap=1, block_length=2)])
    lines = reconstruct_ack_ranges(fr.largest_ack, fr.first_ack_block_length, fr.blocks)

    assert [line.has_range for line in lines] == [True, False, True]
    assert format_ack_range_lines(lines) == [
        "first_ack_block_length=10; [100..90]",
        "gap=3 ack_block_length=0",
        "gap=1 ack_block_length=2; [84..83]",
    ]


def test_zero_length_block_does_not_advance_past_its_packet():
    # The cursor stays on the single packet acknowledged by the empty block
    lines = reconstruct_ack_ranges(50, 0, [AckBlock(0, 0), AckBlock(0, 1)])
    assert (lines[2].high, lines[2].low) == (48, 48)


def test_ranges_never_increase():
    blocks = [AckBlock(gap=g, block_length=n) for g, n in [(0, 1), (5, 3), (2, 0), (1, 7)]]
    for line in reconstruct_ack_ranges(1000, 4, blocks):
        if line.has_range:
            assert line.high >= line.low


def test_ack_frame_lines():
    fr = AckFrame(largest_ack=100, ack_delay=25, first_ack_block_length=0,
                  blocks=[AckBlock(gap=2, block_length=5)], flags=0x10)
    assert format_frame(fr, Direction.RECV, ColorTheme(False)) == [
        "ACK(0xb0) N=0x01 LL=0x00 MM=0x00",
        "num_blks=1 largest_ack=100 ack_delay=25",
        "first_ack_block_length=0; [100..100]",
        "gap=2 ack_block_length=5; [97..93]",
    ]


def test_underflow_wraps_and_warns(caplog):
    with caplog.at_level(logging.WARNING, logger="tracer.ack"):
        lines = reconstruct_ack_ranges(5, 10, [])

    assert lines[0].low == MAX_PKT_NUM - 4
    assert lines[0].wrapped
    assert "wrapped" in caplog.text


def test_block_underflow_wraps():
    lines = reconstruct_ack_ranges(3, 0, [AckBlock(gap=1, block_length=5)])
    assert lines[1].high == 1
    assert lines[1].low == MAX_PKT_NUM - 2
    assert lines[1].wrapped


def test_well_formed_input_does_not_warn(caplog):
    with caplog.at_level(logging.WARNING, logger="tracer.ack"):
        reconstruct_ack_ranges(10, 10, [])
    assert caplog.records == []
