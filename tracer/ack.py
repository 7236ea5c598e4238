"""
ACK Range Reconstruction

Turns the compact (largest_ack, first_ack_block_length, [(gap, length)])
encoding of an ACK frame back into the acknowledged packet number ranges.

Packet numbers are unsigned 64-bit values; a malformed frame whose gaps or
block lengths run past zero wraps around modulo 2**64 and is reported with
a warning instead of an exception.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from quic.constants import MAX_PKT_NUM
from quic.frames import AckBlock, AckFrame


logger = logging.getLogger(__name__)


@dataclass
class AckRangeLine:
    """
    One decoded ACK block.

    `gap` is None for the first block. `high`/`low` are None for a block
    with block_length 0, which acknowledges a single packet number but
    is displayed without an interval.
    """
    gap: Optional[int]
    block_length: int
    high: Optional[int]
    low: Optional[int]
    wrapped: bool = False

    @property
    def has_range(self) -> bool:
        return self.high is not None


def _sub(a: int, b: int) -> Tuple[int, bool]:
    """Unsigned 64-bit subtraction, returning (result, wrapped)."""
    result = a - b
    return result & MAX_PKT_NUM, result < 0


def reconstruct_ack_ranges(largest_ack: int, first_ack_block_length: int,
                           blocks: Iterable[AckBlock]) -> List[AckRangeLine]:
    """
    Decode ACK blocks into acknowledged ranges.

    Args:
        largest_ack: Largest acknowledged packet number
        first_ack_block_length: Length of the first block, minus one
        blocks: Further blocks in decreasing packet number order

    Returns:
        list: One AckRangeLine per block, first block included
    """
    min_ack, wrapped = _sub(largest_ack, first_ack_block_length)
    lines = [AckRangeLine(None, first_ack_block_length, largest_ack, min_ack, wrapped)]
    largest_ack = min_ack

    for blk in blocks:
        largest_ack, wrapped = _sub(largest_ack, blk.gap + 1)

        if blk.block_length == 0:
            lines.append(AckRangeLine(blk.gap, blk.block_length, None, None, wrapped))
            continue

        min_ack, min_wrapped = _sub(largest_ack, blk.block_length - 1)
        lines.append(AckRangeLine(blk.gap, blk.block_length, largest_ack, min_ack,
                                  wrapped or min_wrapped))
        largest_ack = min_ack

    if any(line.wrapped for line in lines):
        logger.warning("ACK blocks run past packet number 0 (largest_ack=%d), "
                       "displayed ranges wrapped around", lines[0].high)

    return lines


def ack_frame_ranges(fr: AckFrame) -> List[AckRangeLine]:
    return reconstruct_ack_ranges(fr.largest_ack, fr.first_ack_block_length, fr.blocks)


def acked_intervals(fr: AckFrame) -> List[Tuple[int, int]]:
    """Displayed [high, low] intervals of an ACK frame, in frame order."""
    return [(line.high, line.low) for line in ack_frame_ranges(fr) if line.has_range]


def format_ack_range_lines(lines: List[AckRangeLine]) -> List[str]:
    """Render decoded ACK blocks as detail lines."""
    out = []
    for line in lines:
        if line.gap is None:
            text = f"first_ack_block_length={line.block_length}"
        else:
            text = f"gap={line.gap} ack_block_length={line.block_length}"
        if line.has_range:
            text += f"; [{line.high}..{line.low}]"
        out.append(text)
    return out
