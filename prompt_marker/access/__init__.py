"""
Access Module.

Access-code checking and signed, time-bounded session tokens.
"""

from prompt_marker.access.gate import (
    AccessDeniedError,
    AccessError,
    AccessGate,
    ReauthorizeRequired,
)
from prompt_marker.access.signing import TokenError, TokenSigner

__all__ = [
    "AccessDeniedError",
    "AccessError",
    "AccessGate",
    "ReauthorizeRequired",
    "TokenError",
    "TokenSigner",
]
