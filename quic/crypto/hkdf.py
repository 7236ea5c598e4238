"""
Stateless Reset Tokens (RFC 9000 Section 10.3.2)

Token derivation lives with the protocol engine; this copy exists so the
demo replay in main.py and the tests can hand the tracer realistic tokens
and reset records.
"""

import os
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.hkdf import HKDF

from ..constants import STATELESS_RESET_TOKENLEN
from ..packets import StatelessReset


STATELESS_RESET_LABEL = b"quic stateless reset"


def derive_stateless_reset_token(static_key: bytes, conn_id: int) -> bytes:
    """
    Derive the stateless reset token bound to a connection ID.
    
    HKDF-SHA256 keyed by an endpoint-wide secret with the connection ID as
    salt, so an endpoint that lost its state can still produce the token.
    
    Args:
        static_key: Endpoint-wide secret
        conn_id: 64-bit connection ID
        
    Returns:
        bytes: 16-byte stateless reset token
    """
    hkdf = HKDF(
        algorithm=hashes.SHA256(),
        length=STATELESS_RESET_TOKENLEN,
        salt=conn_id.to_bytes(8, "big"),
        info=STATELESS_RESET_LABEL,
    )
    return hkdf.derive(static_key)


def generate_stateless_reset(token: bytes, randlen: int) -> StatelessReset:
    """Build a stateless reset record padded with randlen random bytes."""
    return StatelessReset(stateless_reset_token=token, rand=os.urandom(randlen))
