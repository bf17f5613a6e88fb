"""
Session Middleware Module - Black Box Interface

Purpose: Carry signed session IDs on FastAPI requests and responses
Interface: SessionIDMiddleware, create_session_id_middleware(),
           create_session_id_dependency(), get_session_id(), begin_session()
Hidden: Header parsing, error formatting, status code mapping

Can be used by any FastAPI app or sub-app that identifies clients by
session ID. Knows nothing about what is stored against the ID.
"""

import logging
from typing import Any, Dict, Mapping, Optional

from fastapi import HTTPException, Request, Response
from fastapi.responses import JSONResponse

from gateway.config.provider import SessionConfig
from gateway.modules.sessions import (
    ErrorKind,
    InvalidSessionIDError,
    SessionID,
    SessionIDError,
    new_session_id,
    validate_id,
)

logger = logging.getLogger(__name__)

AUTHORIZATION_HEADER = "Authorization"


class MissingSessionIDError(InvalidSessionIDError):
    """The request carried no session ID at all."""

    kind = ErrorKind.MALFORMED_ID
    default_message = "no session ID provided"


def extract_session_id(headers: Mapping[str, str], scheme: str = "Bearer") -> Optional[str]:
    """
    Extract the session ID from an ``Authorization: <scheme> <id>`` header.

    Returns:
        The raw session ID string, or None if absent or using another scheme
    """
    auth_header = headers.get(AUTHORIZATION_HEADER, headers.get(AUTHORIZATION_HEADER.lower()))
    if not auth_header:
        return None

    prefix = f"{scheme} "
    if not auth_header.startswith(prefix):
        return None

    return auth_header[len(prefix):].strip() or None


def get_session_id(request: Request, signing_key: str, scheme: str = "Bearer") -> SessionID:
    """
    Get the validated session ID from a request.

    Raises:
        MissingSessionIDError: If no session ID was provided
        InvalidSessionIDError: If the session ID is malformed or forged
        InvalidSigningKeyError: If the signing key is empty
    """
    raw_id = extract_session_id(request.headers, scheme)
    if raw_id is None:
        raise MissingSessionIDError()
    return validate_id(raw_id, signing_key)


def begin_session(response: Response, signing_key: str, scheme: str = "Bearer") -> SessionID:
    """
    Mint a new session ID and attach it to the response.

    Returns:
        The new SessionID, for the caller to key its session store with
    """
    session_id = new_session_id(signing_key)
    response.headers[AUTHORIZATION_HEADER] = f"{scheme} {session_id}"
    return session_id


class SessionIDMiddleware:
    """
    Session ID validation middleware for FastAPI applications.

    Rejects requests without a valid session ID and exposes the validated
    ID as ``request.state.session_id`` for downstream handlers.
    """

    def __init__(
        self,
        signing_key: str,
        scheme: str = "Bearer",
        skip_paths: Optional[Dict[str, list]] = None,
        log_attempts: bool = True
    ):
        """
        Initialize session ID middleware.

        Args:
            signing_key: HMAC key the session IDs were signed with
            scheme: Authorization scheme that prefixes the session ID
            skip_paths: Dict of {path: [methods]} to skip validation
            log_attempts: Whether to log rejected requests
        """
        self.signing_key = signing_key
        self.scheme = scheme
        self.skip_paths = skip_paths or {}
        self.log_attempts = log_attempts

    def should_skip(self, request: Request) -> bool:
        """Check if validation should be skipped for this request."""
        path = str(request.url.path)
        method = request.method.upper()

        if path in self.skip_paths:
            allowed_methods = self.skip_paths[path]
            if "*" in allowed_methods or method in allowed_methods:
                return True

        return False

    @staticmethod
    def format_error(status_code: int, message: str) -> Dict[str, Any]:
        return {"error": message, "status": status_code}

    async def __call__(self, request: Request, call_next):
        """Process the request through session ID validation."""
        if self.should_skip(request):
            if self.log_attempts:
                logger.debug(f"Skipping session check for {request.method} {request.url.path}")
            return await call_next(request)

        try:
            session_id = get_session_id(request, self.signing_key, self.scheme)
        except InvalidSessionIDError as e:
            if self.log_attempts:
                logger.warning(f"Rejected session ID for {request.url.path}: {e.kind.value}")
            # Malformed and forged IDs get the same response
            return JSONResponse(
                status_code=401,
                content=self.format_error(401, "Authentication failed: invalid session"),
                headers={"WWW-Authenticate": self.scheme},
            )
        except SessionIDError as e:
            logger.error(f"Session ID check failed: {e.kind.value}")
            return JSONResponse(
                status_code=500,
                content=self.format_error(500, "Internal error during authentication"),
            )

        request.state.session_id = session_id
        return await call_next(request)


def create_session_id_middleware(config: SessionConfig) -> SessionIDMiddleware:
    """
    Factory function to create session ID middleware from configuration.

    Args:
        config: Session configuration with signing key, scheme and skip paths

    Returns:
        Configured SessionIDMiddleware instance
    """
    return SessionIDMiddleware(
        signing_key=config.signing_key,
        scheme=config.scheme,
        skip_paths=config.skip_paths,
    )


def create_session_id_dependency(config: SessionConfig):
    """
    Factory function to create a FastAPI dependency that yields the
    validated session ID.

    Usage:
        require_session = create_session_id_dependency(config)

        @app.get("/me")
        async def me(session_id: SessionID = Depends(require_session)):
            ...
    """
    async def require_session_id(request: Request) -> SessionID:
        try:
            return get_session_id(request, config.signing_key, config.scheme)
        except InvalidSessionIDError as e:
            logger.warning(f"Rejected session ID for {request.url.path}: {e.kind.value}")
            raise HTTPException(
                status_code=401,
                detail="Invalid session",
                headers={"WWW-Authenticate": config.scheme},
            )
        except SessionIDError as e:
            logger.error(f"Session ID check failed: {e.kind.value}")
            raise HTTPException(status_code=500, detail="Internal error during authentication")

    return require_session_id


# Module interface - what this module provides
__all__ = [
    "AUTHORIZATION_HEADER",
    "MissingSessionIDError",
    "SessionIDMiddleware",
    "begin_session",
    "create_session_id_dependency",
    "create_session_id_middleware",
    "extract_session_id",
    "get_session_id",
]
