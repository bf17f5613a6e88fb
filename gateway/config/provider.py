"""Configuration provider following Black Box Design principles."""
import os
from dataclasses import dataclass, field
from typing import Dict, List, Protocol


@dataclass
class SessionConfig:
    """Session ID configuration."""
    signing_key: str = field(repr=False)
    scheme: str = "Bearer"
    skip_paths: Dict[str, List[str]] = field(default_factory=dict)


class ConfigProvider(Protocol):
    """Protocol for configuration providers."""

    def get_session_config(self) -> SessionConfig:
        """Get session ID configuration."""
        ...


class EnvConfigProvider:
    """Environment-based configuration provider."""

    def get_session_config(self) -> SessionConfig:
        """Get session ID configuration from environment variables."""
        # Signing key is required - no default for security
        signing_key = os.getenv("SESSION_SIGNING_KEY")
        if not signing_key:
            raise ValueError(
                "SESSION_SIGNING_KEY environment variable is required. "
                "Set it to a long random secret shared by every gateway instance."
            )

        skip_paths_env = os.getenv("SESSION_SKIP_PATHS", "/health")
        skip_paths = {
            path.strip(): ["*"] for path in skip_paths_env.split(",") if path.strip()
        }

        return SessionConfig(
            signing_key=signing_key,
            scheme=os.getenv("SESSION_AUTH_SCHEME", "Bearer"),
            skip_paths=skip_paths,
        )
