"""
Logging configuration that keeps session IDs out of log output
"""

import logging
import logging.config
import re
from typing import Dict, Any

# "Bearer <token>" as it appears in header dumps and error text
_BEARER_PATTERN = re.compile(r"(Bearer\s+)[A-Za-z0-9_\-]+=*")


class SessionIDRedactionFilter(logging.Filter):
    """Filter that masks bearer session IDs in log messages."""

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        redacted = _BEARER_PATTERN.sub(r"\1[REDACTED]", message)
        if redacted != message:
            record.msg = redacted
            record.args = None
        return True


def get_logging_config(level: str = "INFO") -> Dict[str, Any]:
    """Get logging configuration with session ID redaction."""
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {
            "session_id_redaction": {
                "()": SessionIDRedactionFilter
            }
        },
        "formatters": {
            "default": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            }
        },
        "handlers": {
            "default": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stdout",
                "filters": ["session_id_redaction"]
            }
        },
        "loggers": {
            "gateway": {
                "handlers": ["default"],
                "level": level.upper(),
                "propagate": False
            }
        },
        "root": {
            "level": "WARNING",
            "handlers": ["default"]
        }
    }


def configure_logging(level: str = "INFO") -> None:
    """Apply the gateway logging configuration."""
    logging.config.dictConfig(get_logging_config(level))
