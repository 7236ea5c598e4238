"""
QUIC Protocol Constants (draft-ietf-quic-transport-05 era)
"""

# Draft version advertised by the engine this tracer is attached to
QUIC_VERSION = 0xff000005

# Packet header flags
PKT_FLAG_NONE = 0x00
PKT_FLAG_LONG_FORM = 0x01

# QUIC Long Header Packet Types
PKT_VERSION_NEGOTIATION = 0x01
PKT_CLIENT_INITIAL = 0x02
PKT_SERVER_STATELESS_RETRY = 0x03
PKT_SERVER_CLEARTEXT = 0x04
PKT_CLIENT_CLEARTEXT = 0x05
PKT_0RTT_PROTECTED = 0x06
PKT_1RTT_PROTECTED_K0 = 0x07
PKT_1RTT_PROTECTED_K1 = 0x08
PKT_PUBLIC_RESET = 0x09

LONG_PACKET_TYPE_NAMES = {
    PKT_VERSION_NEGOTIATION: "Version Negotiation",
    PKT_CLIENT_INITIAL: "Client Initial",
    PKT_SERVER_STATELESS_RETRY: "Server Stateless Retry",
    PKT_SERVER_CLEARTEXT: "Server Cleartext",
    PKT_CLIENT_CLEARTEXT: "Client Cleartext",
    PKT_0RTT_PROTECTED: "0-RTT Protected",
    PKT_1RTT_PROTECTED_K0: "1-RTT Protected (key phase 0)",
    PKT_1RTT_PROTECTED_K1: "1-RTT Protected (key phase 1)",
    PKT_PUBLIC_RESET: "Public Reset",
}

# QUIC Short Header Packet Types (encode the packet number length)
PKT_01 = 0x01
PKT_02 = 0x02
PKT_03 = 0x03

SHORT_PACKET_TYPE_NAMES = {
    PKT_01: "Short 01",
    PKT_02: "Short 02",
    PKT_03: "Short 03",
}

# QUIC Frame Types
FRAME_PADDING = 0x00
FRAME_RST_STREAM = 0x01
FRAME_CONNECTION_CLOSE = 0x02
FRAME_MAX_DATA = 0x04
FRAME_MAX_STREAM_DATA = 0x05
FRAME_MAX_STREAM_ID = 0x06
FRAME_PING = 0x07
FRAME_BLOCKED = 0x08
FRAME_STREAM_BLOCKED = 0x09
FRAME_STREAM_ID_BLOCKED = 0x0a
FRAME_NEW_CONNECTION_ID = 0x0b
FRAME_STOP_SENDING = 0x0c
FRAME_ACK = 0xa0      # 101NLLMM, low bits carried in AckFrame.flags
FRAME_STREAM = 0xc0   # 11FSSOOD, low bits carried in StreamFrame.flags

FRAME_TYPE_NAMES = {
    FRAME_PADDING: "PADDING",
    FRAME_RST_STREAM: "RST_STREAM",
    FRAME_CONNECTION_CLOSE: "CONNECTION_CLOSE",
    FRAME_MAX_DATA: "MAX_DATA",
    FRAME_MAX_STREAM_DATA: "MAX_STREAM_DATA",
    FRAME_MAX_STREAM_ID: "MAX_STREAM_ID",
    FRAME_PING: "PING",
    FRAME_BLOCKED: "BLOCKED",
    FRAME_STREAM_BLOCKED: "STREAM_BLOCKED",
    FRAME_STREAM_ID_BLOCKED: "STREAM_ID_BLOCKED",
    FRAME_NEW_CONNECTION_ID: "NEW_CONNECTION_ID",
    FRAME_STOP_SENDING: "STOP_SENDING",
    FRAME_ACK: "ACK",
    FRAME_STREAM: "STREAM",
}

# QUIC Transport Error Codes
NO_ERROR = 0x80000000
INTERNAL_ERROR = 0x80000001
FLOW_CONTROL_ERROR = 0x80000003
STREAM_ID_ERROR = 0x80000004
STREAM_STATE_ERROR = 0x80000005
FINAL_OFFSET_ERROR = 0x80000006
FRAME_FORMAT_ERROR = 0x80000007
TRANSPORT_PARAMETER_ERROR = 0x80000008
VERSION_NEGOTIATION_ERROR = 0x80000009
PROTOCOL_VIOLATION = 0x8000000a

ERROR_CODE_NAMES = {
    NO_ERROR: "NO_ERROR",
    INTERNAL_ERROR: "INTERNAL_ERROR",
    FLOW_CONTROL_ERROR: "FLOW_CONTROL_ERROR",
    STREAM_ID_ERROR: "STREAM_ID_ERROR",
    STREAM_STATE_ERROR: "STREAM_STATE_ERROR",
    FINAL_OFFSET_ERROR: "FINAL_OFFSET_ERROR",
    FRAME_FORMAT_ERROR: "FRAME_FORMAT_ERROR",
    TRANSPORT_PARAMETER_ERROR: "TRANSPORT_PARAMETER_ERROR",
    VERSION_NEGOTIATION_ERROR: "VERSION_NEGOTIATION_ERROR",
    PROTOCOL_VIOLATION: "PROTOCOL_VIOLATION",
}

# FRAME_ERROR: 0x800001XX, low byte is the offending frame type
FRAME_ERROR_MIN = 0x80000100
FRAME_ERROR_MAX = 0x800001ff

# Application Error Codes
STOPPING = 0x00000000

APP_ERROR_CODE_NAMES = {
    STOPPING: "STOPPING",
}

# Transport Parameter contexts (which handshake message carried them)
TRANSPORT_PARAMS_TYPE_CLIENT_HELLO = 0
TRANSPORT_PARAMS_TYPE_ENCRYPTED_EXTENSIONS = 1
TRANSPORT_PARAMS_TYPE_NEW_SESSION_TICKET = 2

# Contexts that carry a stateless_reset_token
TRANSPORT_PARAMS_WITH_RESET_TOKEN = {
    TRANSPORT_PARAMS_TYPE_ENCRYPTED_EXTENSIONS,
    TRANSPORT_PARAMS_TYPE_NEW_SESSION_TICKET,
}

STATELESS_RESET_TOKENLEN = 16

# 64-bit packet number space
MAX_PKT_NUM = (1 << 64) - 1
