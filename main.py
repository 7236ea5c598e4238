#!/usr/bin/env python3
"""
QUIC Debug Trace - Demo Entry Point

Replays a scripted client/server exchange through a Tracer so the trace
format can be inspected without a live engine.
Shows:
- Long and short header packets in both directions
- STREAM, ACK (with gaps), flow control and close frames
- Transport parameters for each handshake context
- Version negotiation and stateless reset
- Simulated packet loss

Usage:
    python main.py [options]

Examples:
    # Plain trace on stderr
    python main.py

    # Colored trace, 30% of 1-RTT packets dropped, reproducible
    python main.py --color --loss-rate 0.3 --seed 7

    # Write the trace to a file
    python main.py -o trace.log
"""

import argparse
import os
import sys

from quic.constants import (
    QUIC_VERSION,
    PKT_FLAG_LONG_FORM,
    PKT_CLIENT_INITIAL,
    PKT_SERVER_CLEARTEXT,
    PKT_CLIENT_CLEARTEXT,
    PKT_VERSION_NEGOTIATION,
    PKT_01,
    PKT_03,
    STOPPING,
    NO_ERROR,
    TRANSPORT_PARAMS_TYPE_CLIENT_HELLO,
    TRANSPORT_PARAMS_TYPE_ENCRYPTED_EXTENSIONS,
)
from quic.crypto import derive_stateless_reset_token, generate_stateless_reset
from quic.frames import (
    StreamFrame,
    AckBlock,
    AckFrame,
    PaddingFrame,
    MaxDataFrame,
    MaxStreamDataFrame,
    NewConnectionIdFrame,
    StopSendingFrame,
    ConnectionCloseFrame,
    PingFrame,
)
from quic.packets import PacketHeader, TransportParameters
from tracer import Tracer


CLIENT_CID = 0x1f2e3d4c5b6a7980
SERVER_CID = 0x8899aabbccddeeff


def run_handshake(tr: Tracer, static_key: bytes):
    """Trace the cleartext handshake packets."""
    # Server doesn't speak our draft yet
    hd = PacketHeader(PKT_VERSION_NEGOTIATION, PKT_FLAG_LONG_FORM, CLIENT_CID, 0, 0)
    tr.on_recv_packet(hd)
    tr.on_recv_version_negotiation(hd, [0xff000004, QUIC_VERSION])

    hd = PacketHeader(PKT_CLIENT_INITIAL, PKT_FLAG_LONG_FORM, CLIENT_CID, 1, QUIC_VERSION)
    tr.on_send_packet(hd)
    tr.on_send_frame(hd, StreamFrame(stream_id=0, offset=0, data_length=287, flags=0x01))
    tr.on_send_frame(hd, PaddingFrame(length=937))
    tr.print_transport_params(TransportParameters(
        initial_max_stream_data=262144,
        initial_max_data=1024,
        initial_max_stream_id=100,
        idle_timeout=30,
        negotiated_version=QUIC_VERSION,
        initial_version=QUIC_VERSION,
    ), TRANSPORT_PARAMS_TYPE_CLIENT_HELLO)

    hd = PacketHeader(PKT_SERVER_CLEARTEXT, PKT_FLAG_LONG_FORM, SERVER_CID, 7, QUIC_VERSION)
    tr.on_recv_packet(hd)
    tr.on_recv_frame(hd, AckFrame(largest_ack=1, ack_delay=120, flags=0x00))
    tr.on_recv_frame(hd, StreamFrame(stream_id=0, offset=0, data_length=1150, flags=0x03))
    tr.print_transport_params(TransportParameters(
        initial_max_stream_data=262144,
        initial_max_data=1024,
        initial_max_stream_id=199,
        idle_timeout=30,
        supported_versions=[QUIC_VERSION, 0xff000004],
        stateless_reset_token=derive_stateless_reset_token(static_key, SERVER_CID),
    ), TRANSPORT_PARAMS_TYPE_ENCRYPTED_EXTENSIONS)

    hd = PacketHeader(PKT_CLIENT_CLEARTEXT, PKT_FLAG_LONG_FORM, SERVER_CID, 2, QUIC_VERSION)
    tr.on_send_packet(hd)
    tr.on_send_frame(hd, AckFrame(largest_ack=7, ack_delay=40, flags=0x01))
    tr.on_send_frame(hd, StreamFrame(stream_id=0, offset=287, data_length=74, flags=0x07))
    tr.on_handshake_completed()


def run_application(tr: Tracer, static_key: bytes, loss_rate: float) -> dict:
    """
    Trace 1-RTT traffic, dropping packets with the given probability.

    Returns:
        dict: Sent/dropped counters
    """
    stats = {"sent": 0, "dropped": 0}

    for pn in range(3, 13):
        hd = PacketHeader(PKT_01, 0, SERVER_CID, pn)
        if tr.packet_lost(loss_rate):
            stats["dropped"] += 1
            continue
        stats["sent"] += 1
        tr.on_send_packet(hd)
        tr.on_send_frame(hd, StreamFrame(stream_id=4, offset=(pn - 3) * 1200,
                                         data_length=1200, flags=0x0b))

    # Peer acknowledges with holes
    hd = PacketHeader(PKT_03, 0, CLIENT_CID, 8)
    tr.on_recv_packet(hd)
    tr.on_recv_frame(hd, AckFrame(
        largest_ack=12, ack_delay=25, first_ack_block_length=2, flags=0x10,
        blocks=[AckBlock(gap=1, block_length=3), AckBlock(gap=0, block_length=0),
                AckBlock(gap=2, block_length=1)],
    ))
    tr.on_recv_frame(hd, MaxDataFrame(max_data=2048))
    tr.on_recv_frame(hd, MaxStreamDataFrame(stream_id=4, max_stream_data=524288))
    tr.on_recv_frame(hd, NewConnectionIdFrame(
        seq=1, conn_id=CLIENT_CID + 1,
        stateless_reset_token=derive_stateless_reset_token(static_key, CLIENT_CID + 1),
    ))
    tr.on_recv_frame(hd, StopSendingFrame(stream_id=4, app_error_code=STOPPING))
    tr.on_recv_frame(hd, PingFrame())

    data = b"GET /index.html\r\n" + b"\x00" * 40
    tr.print_stream_data(4, data)

    hd = PacketHeader(PKT_01, 0, SERVER_CID, 13)
    tr.on_send_packet(hd)
    tr.on_send_frame(hd, ConnectionCloseFrame(error_code=NO_ERROR, reason=b"bye"))

    token = derive_stateless_reset_token(static_key, CLIENT_CID)
    tr.on_recv_stateless_reset(PacketHeader(PKT_01, 0, CLIENT_CID, 0),
                               generate_stateless_reset(token, 20))
    return stats


def main():
    parser = argparse.ArgumentParser(
        description="Replay a scripted QUIC exchange through the debug tracer"
    )
    parser.add_argument(
        "--color",
        action="store_true",
        help="Colorize output with ANSI escapes"
    )
    parser.add_argument(
        "--loss-rate",
        type=float,
        default=0.0,
        help="Simulated 1-RTT packet loss rate (default: 0.0)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the loss simulator"
    )
    parser.add_argument(
        "-o", "--output",
        default=None,
        help="Write the trace to this file instead of stderr"
    )

    args = parser.parse_args()

    sink = open(args.output, "w", encoding="utf-8") if args.output else None
    try:
        tr = Tracer(color=args.color, sink=sink, seed=args.seed)
        tr.reset_timestamp()
        static_key = os.urandom(32)

        run_handshake(tr, static_key)
        stats = run_application(tr, static_key, args.loss_rate)
    finally:
        if sink:
            sink.close()

    print(f"\n    === Final Statistics ===")
    print(f"    1-RTT packets sent: {stats['sent']}")
    print(f"    1-RTT packets dropped: {stats['dropped']}")
    if tr.write_errors:
        print(f"    ⚠️ Trace write errors: {tr.write_errors}", file=sys.stderr)


if __name__ == "__main__":
    main()
