"""Error kinds raised by the sessions module."""

from enum import Enum


class ErrorKind(str, Enum):
    """Stable classification of session ID failures."""

    INVALID_KEY = "invalid_key"
    RANDOMNESS_UNAVAILABLE = "randomness_unavailable"
    MALFORMED_ID = "malformed_id"
    INVALID_SIGNATURE = "invalid_signature"


class SessionIDError(Exception):
    """Base class for all session ID failures."""

    kind: ErrorKind
    default_message = "session ID error"

    def __init__(self, message: str = ""):
        super().__init__(message or self.default_message)


class InvalidSigningKeyError(SessionIDError):
    """The signing key is empty. A deployment error, not a per-request one."""

    kind = ErrorKind.INVALID_KEY
    default_message = "signing key may not be empty"


class RandomnessUnavailableError(SessionIDError):
    """The secure random source could not supply the ID bytes."""

    kind = ErrorKind.RANDOMNESS_UNAVAILABLE
    default_message = "secure random source unavailable"


class InvalidSessionIDError(SessionIDError):
    """
    The presented string is not a valid session ID.

    Callers should treat every subclass the same way ("not authenticated").
    The subclasses exist for logging and metrics only.
    """

    default_message = "invalid session ID"


class MalformedSessionIDError(InvalidSessionIDError):
    """The string is not a correctly encoded, correctly sized session ID."""

    kind = ErrorKind.MALFORMED_ID
    default_message = "malformed session ID"


class InvalidSignatureError(InvalidSessionIDError):
    """The session ID decoded, but its signature does not match."""

    kind = ErrorKind.INVALID_SIGNATURE
    default_message = "session ID signature mismatch"
