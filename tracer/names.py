"""
Type-Name Resolver

Total mappings from protocol codes to display names; anything not
declared resolves to "UNKNOWN".
"""

from quic.constants import (
    LONG_PACKET_TYPE_NAMES,
    SHORT_PACKET_TYPE_NAMES,
    FRAME_TYPE_NAMES,
    ERROR_CODE_NAMES,
    APP_ERROR_CODE_NAMES,
    FRAME_ERROR_MIN,
    FRAME_ERROR_MAX,
)


UNKNOWN = "UNKNOWN"


def long_packet_type_name(pkt_type: int) -> str:
    return LONG_PACKET_TYPE_NAMES.get(pkt_type, UNKNOWN)


def short_packet_type_name(pkt_type: int) -> str:
    return SHORT_PACKET_TYPE_NAMES.get(pkt_type, UNKNOWN)


def frame_type_name(frame_type: int) -> str:
    return FRAME_TYPE_NAMES.get(frame_type, UNKNOWN)


def error_code_name(error_code: int) -> str:
    """
    Name of a transport error code.
    
    Codes without an exact match inside 0x800001XX are FRAME_ERROR.
    """
    name = ERROR_CODE_NAMES.get(error_code)
    if name is not None:
        return name
    if FRAME_ERROR_MIN <= error_code <= FRAME_ERROR_MAX:
        return "FRAME_ERROR"
    return UNKNOWN


def app_error_code_name(app_error_code: int) -> str:
    return APP_ERROR_CODE_NAMES.get(app_error_code, UNKNOWN)
