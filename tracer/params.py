"""
Transport Parameter Renderer
"""

from typing import List

from quic.constants import (
    TRANSPORT_PARAMS_TYPE_CLIENT_HELLO,
    TRANSPORT_PARAMS_TYPE_ENCRYPTED_EXTENSIONS,
    TRANSPORT_PARAMS_WITH_RESET_TOKEN,
    STATELESS_RESET_TOKENLEN,
)
from quic.packets import TransportParameters
from utils.hexdump import format_hex


def format_transport_params(params: TransportParameters, params_type: int) -> List[str]:
    """
    Render transport parameters as "; name=value" lines.
    
    Context-specific fields come first, then the common limits in a fixed
    order, then the stateless reset token for contexts that carry one.
    
    Args:
        params: Transport parameters
        params_type: TRANSPORT_PARAMS_TYPE_* of the carrying handshake message
        
    Returns:
        list: Lines without indentation
    """
    lines = []
    
    if params_type == TRANSPORT_PARAMS_TYPE_CLIENT_HELLO:
        lines.append(f"; negotiated_version=0x{params.negotiated_version:08x}")
        lines.append(f"; initial_version=0x{params.initial_version:08x}")
    elif params_type == TRANSPORT_PARAMS_TYPE_ENCRYPTED_EXTENSIONS:
        for i, version in enumerate(params.supported_versions):
            lines.append(f"; supported_version[{i}]=0x{version:08x}")
    
    lines.append(f"; initial_max_stream_data={params.initial_max_stream_data}")
    lines.append(f"; initial_max_data={params.initial_max_data}")
    lines.append(f"; initial_max_stream_id={params.initial_max_stream_id}")
    lines.append(f"; idle_timeout={params.idle_timeout}")
    lines.append(f"; omit_connection_id={int(params.omit_connection_id)}")
    lines.append(f"; max_packet_size={params.max_packet_size}")
    
    if params_type in TRANSPORT_PARAMS_WITH_RESET_TOKEN:
        token = format_hex(params.stateless_reset_token, STATELESS_RESET_TOKENLEN)
        lines.append(f"; stateless_reset_token={token}")
    
    return lines
