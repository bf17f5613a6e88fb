"""
Sessions Module - Black Box Interface

Purpose: Mint and validate digitally-signed session IDs
Interface: new_session_id(), validate_id(), verify_session_id(), SessionID
Hidden: Byte layout, HMAC construction, encoding

Holds no state and no reference to the signing key, so it can be swapped
for any other signed-ID scheme without affecting session storage or transport.
"""

from .errors import (
    ErrorKind,
    InvalidSessionIDError,
    InvalidSignatureError,
    InvalidSigningKeyError,
    MalformedSessionIDError,
    RandomnessUnavailableError,
    SessionIDError,
)
from .sessionid import (
    ID_LENGTH,
    INVALID_SESSION_ID,
    SIGNATURE_LENGTH,
    SIGNED_LENGTH,
    SessionID,
    new_session_id,
    validate_id,
    verify_session_id,
)

__all__ = [
    "ID_LENGTH",
    "INVALID_SESSION_ID",
    "SIGNATURE_LENGTH",
    "SIGNED_LENGTH",
    "ErrorKind",
    "InvalidSessionIDError",
    "InvalidSignatureError",
    "InvalidSigningKeyError",
    "MalformedSessionIDError",
    "RandomnessUnavailableError",
    "SessionID",
    "SessionIDError",
    "new_session_id",
    "validate_id",
    "verify_session_id",
]
