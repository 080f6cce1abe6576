"""
Custom logging configuration to suppress orchestrator probe logs
"""

import logging
import logging.config
from typing import Dict, Any

# Requests the orchestrator repeats constantly; their access lines are noise
PROBE_REQUESTS = (
    ("GET", "/healthz"),
    ("POST", "/Plugin.Implements"),
)


class ProbeRequestFilter(logging.Filter):
    """Filter to suppress liveness and discovery probe logs."""
    
    def filter(self, record: logging.LogRecord) -> bool:
        """Filter out probe requests from uvicorn access logs."""
        if record.name == "uvicorn.access":
            message = record.getMessage()
            for method, path in PROBE_REQUESTS:
                if method in message and path in message:
                    return False
        return True


def get_logging_config(level: str = "INFO") -> Dict[str, Any]:
    """Get logging configuration with probe suppression."""
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {
            "probe_filter": {
                "()": ProbeRequestFilter
            }
        },
        "formatters": {
            "default": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            },
            "access": {
                "format": "%(message)s"
            }
        },
        "handlers": {
            "default": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stdout"
            },
            "access": {
                "class": "logging.StreamHandler",
                "formatter": "access",
                "stream": "ext://sys.stdout",
                "filters": ["probe_filter"]
            }
        },
        "loggers": {
            "uvicorn": {
                "handlers": ["default"],
                "level": "INFO",
                "propagate": False
            },
            "uvicorn.error": {
                "handlers": ["default"],
                "level": "INFO",
                "propagate": False
            },
            "uvicorn.access": {
                "handlers": ["access"],
                "level": "INFO",
                "propagate": False
            },
            "groupflavor": {
                "handlers": ["default"],
                "level": level,
                "propagate": False
            }
        },
        "root": {
            "level": "INFO",
            "handlers": ["default"]
        }
    }


def configure_logging(level: str = "INFO") -> None:
    """Apply the logging configuration."""
    logging.config.dictConfig(get_logging_config(level))
