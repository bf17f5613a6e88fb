"""
Shared pytest fixtures for gateway tests.

This module provides common fixtures including:
- A session configuration with a fixed signing key
- A FastAPI app protected by the session ID middleware
- A FastAPI app using the session ID dependency
"""

import pytest
from fastapi import Depends, FastAPI, Request, Response
from fastapi.testclient import TestClient

from gateway.config.provider import SessionConfig
from gateway.modules.middleware import (
    begin_session,
    create_session_id_dependency,
    create_session_id_middleware,
)
from gateway.modules.sessions import SessionID

SIGNING_KEY = "test-signing-key"


@pytest.fixture
def signing_key():
    return SIGNING_KEY


@pytest.fixture
def session_config():
    """Session configuration with /health and /sessions left open."""
    return SessionConfig(
        signing_key=SIGNING_KEY,
        skip_paths={"/health": ["GET"], "/sessions": ["POST"]},
    )


@pytest.fixture
def middleware_app(session_config):
    """App whose routes are guarded by SessionIDMiddleware."""
    app = FastAPI()
    session_middleware = create_session_id_middleware(session_config)

    @app.middleware("http")
    async def check_session(request: Request, call_next):
        return await session_middleware(request, call_next)

    @app.get("/health")
    def health():
        return {"status": "ok"}

    @app.post("/sessions")
    def start_session(response: Response):
        session_id = begin_session(response, session_config.signing_key)
        return {"started": session_id.is_valid}

    @app.get("/me")
    def me(request: Request):
        return {"session_id": str(request.state.session_id)}

    return app


@pytest.fixture
def middleware_client(middleware_app):
    return TestClient(middleware_app)


@pytest.fixture
def dependency_client(session_config):
    """Client for an app that checks session IDs per route via Depends."""
    app = FastAPI()
    require_session = create_session_id_dependency(session_config)

    @app.get("/me")
    async def me(session_id: SessionID = Depends(require_session)):
        return {"session_id": str(session_id)}

    return TestClient(app)
