"""
ANSI Color Theme

Escape sequences are only emitted while color output is enabled.
"""

from enum import Enum


class Direction(Enum):
    """Which way a packet or frame is travelling."""
    SEND = "send"
    RECV = "recv"


ANSI_RESET = "\033[0m"
ANSI_TIMESTAMP = "\033[33m"

TYPE_COLORS = {
    Direction.SEND: "\033[1;35m",
    Direction.RECV: "\033[1;36m",
}
PKT_NUM_COLORS = {
    Direction.SEND: "\033[38;5;40m",
    Direction.RECV: "\033[38;5;51m",
}


class ColorTheme:
    """Direction-aware ANSI escape selection."""
    
    def __init__(self, enabled: bool = False):
        self.enabled = enabled
    
    def esc(self, code: str) -> str:
        return code if self.enabled else ""
    
    def end(self) -> str:
        return ANSI_RESET if self.enabled else ""
    
    def timestamp(self) -> str:
        return self.esc(ANSI_TIMESTAMP)
    
    def pkt(self, direction: Direction) -> str:
        return self.esc(TYPE_COLORS[direction])
    
    def frame(self, direction: Direction) -> str:
        return self.esc(TYPE_COLORS[direction])
    
    def pkt_num(self, direction: Direction) -> str:
        return self.esc(PKT_NUM_COLORS[direction])
