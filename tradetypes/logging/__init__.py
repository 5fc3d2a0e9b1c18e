# Structured logging for adapter-boundary helpers
import logging
import sys
from typing import Any, Dict, Optional

import structlog

from tradetypes.config.settings import Settings, get_settings

# Global flag to prevent duplicate logging configuration
_logging_configured = False


def configure_logging(settings: Optional[Settings] = None, force: bool = False) -> None:
    """Configure stdlib logging and structlog once per process."""
    global _logging_configured

    if _logging_configured and not force:
        return

    settings = settings or get_settings()
    level = settings.logging.level
    environment = settings.environment.value

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
        force=force,
    )

    def add_environment(logger, name, event_dict):
        event_dict.setdefault("env", environment)
        return event_dict

    processors = [
        structlog.contextvars.merge_contextvars,
        add_environment,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if settings.logging.json_format:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    _logging_configured = True


def get_logger(name: str, component: Optional[str] = None) -> structlog.BoundLogger:
    """Get a structured logger, optionally tagged with a component."""
    if component:
        return structlog.get_logger(name, component=component)
    return structlog.get_logger(name)


def bind_broker_context(logger: structlog.BoundLogger, broker: str,
                        account: Optional[str] = None) -> structlog.BoundLogger:
    """Bind broker (and account) context consistently to a logger."""
    ctx: Dict[str, Any] = {"broker": broker}
    if account:
        ctx["account"] = account
    return logger.bind(**ctx)


__all__ = ["configure_logging", "get_logger", "bind_broker_context"]
