"""
Stateless reset token helpers for the demo replay and tests
"""

from .hkdf import (
    derive_stateless_reset_token,
    generate_stateless_reset,
)
