"""
Structured logging configuration using structlog.

Every log line is an event name plus keyword context (`booking_created`,
`payment_processed`, ...). Production renders JSON lines; other environments
get the console renderer. Credentials and card data never reach the output.
"""

import logging
import sys
import structlog
from app.core.config import get_settings

NOISY_LOGGERS = ("uvicorn.access", "sqlalchemy.engine", "aiosqlite", "asyncio")

REDACTED_KEYS = frozenset({"password", "token", "authorization", "card_data", "number", "cvv"})


def redact_secrets(logger, method_name, event_dict):
    for key in REDACTED_KEYS.intersection(event_dict):
        event_dict[key] = "***"
    return event_dict


def _renderer(environment: str):
    if environment == "production":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())


def setup_logging() -> None:
    settings = get_settings()

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        redact_secrets,
        structlog.processors.StackInfoRenderer(),
    ]
    if settings.ENVIRONMENT == "production":
        processors.append(structlog.processors.format_exc_info)

    structlog.configure(
        processors=processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _renderer(settings.ENVIRONMENT),
        ],
    ))

    root_logger = logging.getLogger()
    # Lifespan can run more than once per process (tests, reloader)
    root_logger.handlers = [handler]
    root_logger.setLevel(settings.LOG_LEVEL.upper())

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str = __name__) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)
