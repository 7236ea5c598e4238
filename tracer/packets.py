"""
Packet Renderer - long and short header lines
"""

from quic.packets import PacketHeader

from .color import ColorTheme, Direction
from .names import long_packet_type_name, short_packet_type_name


def _format_common(name: str, hd: PacketHeader, direction: Direction,
                   theme: ColorTheme) -> str:
    return (f"{theme.pkt(direction)}{name}{theme.end()}(0x{hd.type:02x}) "
            f"CID=0x{hd.conn_id:016x} "
            f"PKN={theme.pkt_num(direction)}{hd.pkt_num}{theme.end()}")


def format_packet_long(hd: PacketHeader, direction: Direction, theme: ColorTheme) -> str:
    line = _format_common(long_packet_type_name(hd.type), hd, direction, theme)
    return f"{line} V=0x{hd.version:08x}"


def format_packet_short(hd: PacketHeader, direction: Direction, theme: ColorTheme) -> str:
    return _format_common(short_packet_type_name(hd.type), hd, direction, theme)


def format_packet(hd: PacketHeader, direction: Direction, theme: ColorTheme) -> str:
    """Dispatch on header form."""
    if hd.is_long_form:
        return format_packet_long(hd, direction, theme)
    return format_packet_short(hd, direction, theme)
