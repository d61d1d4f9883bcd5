"""Structured logging for the API and the store.

Log records are rendered as JSON lines, or as coloured console output when
``debug`` is on. Request and entity ids bound with the helpers below are
merged into every record emitted while handling a request.
"""

import logging
import sys

import structlog
from structlog.contextvars import bind_contextvars, clear_contextvars

# Libraries whose INFO output would drown the app's own events
QUIET_LOGGERS = ("sqlalchemy.engine", "aiosqlite", "alembic", "uvicorn.access")

ENTITY_KEYS = ("project_id", "time_block_id")


def _renderer(debug: bool) -> structlog.typing.Processor:
    if debug:
        return structlog.dev.ConsoleRenderer(colors=True)
    return structlog.processors.JSONRenderer()


def setup_logging(debug: bool = False) -> None:
    """Configure structlog and the stdlib root logger.

    Args:
        debug: Console output at DEBUG level instead of JSON at INFO.
    """
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=False),
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.UnicodeDecoder(),
            _renderer(debug),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger, usually ``get_logger(__name__)``."""
    return structlog.get_logger(name)


def bind_request_context(request_id: str | None) -> None:
    """Bind the correlation id of the current request, if there is one."""
    if request_id:
        bind_contextvars(request_id=request_id)


def bind_entity_context(**ids: object) -> dict[str, object]:
    """Bind project/time block ids for the rest of the request.

    Keys other than ``project_id`` and ``time_block_id`` and ``None`` values
    are ignored. Returns what was bound.
    """
    bound = {key: ids[key] for key in ENTITY_KEYS if ids.get(key) is not None}
    if bound:
        bind_contextvars(**bound)
    return bound


def clear_request_context() -> None:
    """Drop everything bound for the current request."""
    clear_contextvars()
