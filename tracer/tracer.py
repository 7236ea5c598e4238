"""
QUIC Debug Tracer - callback surface for the protocol engine

Owns the per-connection trace state (clock, color theme, output sink and
loss simulator) and renders send/receive events as text lines.

Usage:
======
    from tracer import Tracer

    tr = Tracer(color=True)
    tr.reset_timestamp()
    tr.on_send_packet(hd)
    for fr in frames:
        tr.on_send_frame(hd, fr)

A Tracer is not thread-safe; give each thread or connection its own.
"""

import logging
import sys
from typing import Iterable, Optional, Sequence, TextIO

from quic.packets import PacketHeader, StatelessReset, TransportParameters

from .clock import TraceClock
from .color import ColorTheme, Direction
from .events import format_version_negotiation, format_stateless_reset, format_stream_data
from .frames import format_frame
from .loss import LossSimulator
from .packets import format_packet
from .params import format_transport_params


logger = logging.getLogger(__name__)

INDENT = " " * 11


class Tracer:
    """
    Human-readable trace of QUIC packets and frames.

    Every callback returns 0 so it can be plugged straight into the
    engine's callback table; a failing sink is logged, never raised.

    Args:
        color: Emit ANSI color escapes
        sink: Writable text stream (default: sys.stderr)
        seed: Seed for the loss simulator
        clock: Clock used for timestamps (default: monotonic)
    """

    def __init__(self, color: bool = False, sink: Optional[TextIO] = None,
                 seed: Optional[int] = None, clock: Optional[TraceClock] = None):
        self.theme = ColorTheme(color)
        self.sink = sink
        self.clock = clock if clock is not None else TraceClock()
        self.loss = LossSimulator(seed)
        self.write_errors = 0

    # =========================================================================
    # Configuration
    # =========================================================================

    def set_color_output(self, enabled: bool) -> None:
        self.theme.enabled = enabled

    def set_output(self, sink: Optional[TextIO]) -> None:
        """Select the output sink (None restores standard error)."""
        self.sink = sink

    def reset_timestamp(self) -> None:
        self.clock.reset()

    # =========================================================================
    # Output
    # =========================================================================

    def _write(self, text: str) -> bool:
        # sys.stderr is looked up per write so pytest capture and redirects apply
        sink = self.sink if self.sink is not None else sys.stderr
        try:
            sink.write(text)
            sink.flush()
        except (OSError, ValueError, TypeError) as e:
            self.write_errors += 1
            logger.warning("trace output failed: %s", e)
            return False
        return True

    def _indented(self, lines: Iterable[str]) -> str:
        return "".join(f"{INDENT}{line}\n" for line in lines)

    def _raw(self, lines: Iterable[str]) -> str:
        return "".join(f"{line}\n" for line in lines)

    def timestamp_prefix(self) -> str:
        return f"{self.theme.timestamp()}{self.clock.format()}{self.theme.end()} "

    def print_timestamp(self) -> None:
        self._write(self.timestamp_prefix())

    def print_indent(self) -> None:
        self._write(INDENT)

    # =========================================================================
    # Engine callbacks
    # =========================================================================

    def _packet(self, label: str, hd: PacketHeader, direction: Direction) -> int:
        self._write(f"{self.timestamp_prefix()}{label} "
                    f"{format_packet(hd, direction, self.theme)}\n")
        return 0

    def _frame(self, fr, direction: Direction) -> int:
        self._write(self._indented(format_frame(fr, direction, self.theme)))
        return 0

    def on_send_packet(self, hd: PacketHeader) -> int:
        return self._packet("TX", hd, Direction.SEND)

    def on_recv_packet(self, hd: PacketHeader) -> int:
        return self._packet("RX", hd, Direction.RECV)

    def on_send_frame(self, hd: PacketHeader, fr) -> int:
        return self._frame(fr, Direction.SEND)

    def on_recv_frame(self, hd: PacketHeader, fr) -> int:
        return self._frame(fr, Direction.RECV)

    def on_handshake_completed(self) -> int:
        self._write(f"{self.timestamp_prefix()}QUIC handshake has completed\n")
        return 0

    def on_recv_version_negotiation(self, hd: PacketHeader, versions: Sequence[int]) -> int:
        self._write(self._indented(format_version_negotiation(versions)))
        return 0

    def on_recv_stateless_reset(self, hd: PacketHeader, sr: StatelessReset) -> int:
        lines, dump = format_stateless_reset(sr)
        self._write(self._indented(lines) + self._raw(dump))
        return 0

    # =========================================================================
    # Other renderers
    # =========================================================================

    def print_transport_params(self, params: TransportParameters, params_type: int) -> None:
        self._write(self._indented(format_transport_params(params, params_type)))

    def print_stream_data(self, stream_id: int, data: bytes) -> None:
        lines, dump = format_stream_data(stream_id, data)
        self._write(self._indented(lines) + self._raw(dump))

    # =========================================================================
    # Loss simulation
    # =========================================================================

    def packet_lost(self, probability: float) -> bool:
        return self.loss.packet_lost(probability)
