"""
Version Negotiation, Stateless Reset and Stream Data Renderers
"""

from typing import List, Sequence, Tuple

from quic.constants import STATELESS_RESET_TOKENLEN
from quic.packets import StatelessReset
from utils.hexdump import format_hex, hexdump_lines


def format_version_negotiation(versions: Sequence[int]) -> List[str]:
    return [f"version=0x{v:08x}" for v in versions]


def format_stateless_reset(sr: StatelessReset) -> Tuple[List[str], List[str]]:
    """
    Render a stateless reset.
    
    Returns:
        tuple: (indented lines, hex dump lines of the random padding)
    """
    token = format_hex(sr.stateless_reset_token, STATELESS_RESET_TOKENLEN)
    lines = [
        "; Stateless Reset",
        f"stateless_reset_token={token} randlen={sr.randlen}",
    ]
    return lines, hexdump_lines(sr.rand)


def format_stream_data(stream_id: int, data: bytes) -> Tuple[List[str], List[str]]:
    """Stream ID tag line plus hex dump of the data."""
    return [f"ordered STREAM data stream_id=0x{stream_id:08x}"], hexdump_lines(data)
