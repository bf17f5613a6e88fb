"""
Signed session IDs.

A session ID is a base64 URL encoded string created from a byte string
where the first ``ID_LENGTH`` bytes are cryptographically random and the
remaining bytes are an HMAC-SHA256 of those random bytes:

    +-----------------------------------------------------+
    |...32 crypto random bytes...|HMAC hash of those bytes|
    +-----------------------------------------------------+

Anyone holding the signing key can check that an ID was minted by a key
holder without looking anything up.
"""

import base64
import binascii
import hashlib
import hmac
import logging
import secrets
from typing import Optional, Tuple, Union

from .errors import (
    InvalidSignatureError,
    InvalidSigningKeyError,
    MalformedSessionIDError,
    RandomnessUnavailableError,
    SessionIDError,
)

logger = logging.getLogger(__name__)

# Length of the random ID portion
ID_LENGTH = 32

# Length of the signature, fixed by the digest
SIGNATURE_LENGTH = hashlib.sha256().digest_size

# Full decoded length of a signed session ID
SIGNED_LENGTH = ID_LENGTH + SIGNATURE_LENGTH

SigningKey = Union[str, bytes]


class SessionID(str):
    """A digitally-signed session ID. Compared by value like any string."""

    __slots__ = ()

    @property
    def is_valid(self) -> bool:
        return self != ""

    def as_string(self) -> str:
        """Return the encoded ID exactly as it travels on the wire."""
        return str.__str__(self)

    def __str__(self) -> str:
        return self.as_string()

    def __repr__(self) -> str:
        # Keep the token itself out of reprs and tracebacks
        return "SessionID(valid)" if self.is_valid else "SessionID(invalid)"


# Empty, invalid session ID returned alongside any error
INVALID_SESSION_ID = SessionID("")


def _key_bytes(signing_key: Optional[SigningKey]) -> bytes:
    if not signing_key:
        raise InvalidSigningKeyError()
    if isinstance(signing_key, str):
        return signing_key.encode("utf-8")
    return bytes(signing_key)


def _sign(id_bytes: bytes, key: bytes) -> bytes:
    return hmac.new(key, id_bytes, hashlib.sha256).digest()


def _random_id_bytes() -> bytes:
    try:
        id_bytes = secrets.token_bytes(ID_LENGTH)
    except (OSError, NotImplementedError) as e:
        logger.error(f"Secure random source failed: {type(e).__name__}")
        raise RandomnessUnavailableError() from e

    if len(id_bytes) != ID_LENGTH:
        logger.error(
            f"Secure random source returned {len(id_bytes)} bytes, expected {ID_LENGTH}"
        )
        raise RandomnessUnavailableError()

    return id_bytes


def new_session_id(signing_key: SigningKey) -> SessionID:
    """
    Create a new digitally-signed session ID.

    Args:
        signing_key: HMAC signing key; a string is used as its UTF-8 bytes

    Returns:
        New SessionID, always 88 characters long

    Raises:
        InvalidSigningKeyError: If the signing key is empty
        RandomnessUnavailableError: If random bytes could not be generated
    """
    # Reject the key before drawing any randomness
    key = _key_bytes(signing_key)

    id_bytes = _random_id_bytes()
    signed = id_bytes + _sign(id_bytes, key)

    return SessionID(base64.urlsafe_b64encode(signed).decode("ascii"))


def validate_id(candidate: str, signing_key: SigningKey) -> SessionID:
    """
    Validate a session ID string against the signing key.

    Args:
        candidate: Session ID as presented by a client
        signing_key: The key the ID was signed with

    Returns:
        The candidate as a SessionID

    Raises:
        InvalidSigningKeyError: If the signing key is empty
        MalformedSessionIDError: If the candidate is not a well-formed signed ID
        InvalidSignatureError: If the signature does not match
    """
    key = _key_bytes(signing_key)

    if not isinstance(candidate, str):
        raise MalformedSessionIDError()

    try:
        decoded = base64.urlsafe_b64decode(candidate)
    except (binascii.Error, ValueError):
        logger.debug("Session ID rejected: undecodable")
        raise MalformedSessionIDError() from None

    if len(decoded) != SIGNED_LENGTH:
        logger.debug(f"Session ID rejected: decoded to {len(decoded)} bytes")
        raise MalformedSessionIDError()

    # The lenient decoder skips foreign characters, so only the canonical
    # encoding of the decoded bytes is accepted
    if base64.urlsafe_b64encode(decoded).decode("ascii") != candidate:
        logger.debug("Session ID rejected: non-canonical encoding")
        raise MalformedSessionIDError()

    expected = _sign(decoded[:ID_LENGTH], key)
    if not hmac.compare_digest(expected, decoded[ID_LENGTH:]):
        logger.debug("Session ID rejected: signature mismatch")
        raise InvalidSignatureError()

    return SessionID(candidate)


def verify_session_id(
    candidate: str, signing_key: SigningKey
) -> Tuple[SessionID, Optional[SessionIDError]]:
    """
    Validate a session ID without raising.

    Returns:
        Tuple of (session_id, error); session_id is INVALID_SESSION_ID
        whenever error is set
    """
    try:
        return validate_id(candidate, signing_key), None
    except SessionIDError as e:
        return INVALID_SESSION_ID, e
