"""Standard library logging setup.

Code that does not emit logfire spans itself (the revalidation client,
scripts) logs through ``get_logger``. Each line carries the id of the
active trace so it can be matched with the request span in Logfire.
"""

import logging
import sys

from opentelemetry import trace

from threads.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s [%(trace_id)s] %(message)s"

# Libraries that are noisy at INFO; SQL is only echoed in debug mode
_QUIET = {
    "httpx": logging.WARNING,
    "httpcore": logging.WARNING,
    "uvicorn.access": logging.WARNING,
}


class TraceFormatter(logging.Formatter):
    """Adds ``trace_id`` of the current span, or ``no-trace``."""

    def format(self, record: logging.LogRecord) -> str:
        context = trace.get_current_span().get_span_context()
        record.trace_id = (
            format(context.trace_id, "032x") if context.is_valid else "no-trace"
        )
        return super().format(record)


def setup_logging(settings: Settings) -> None:
    """Configure the root logger for the process."""
    level = logging.DEBUG if settings.debug else logging.INFO

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(TraceFormatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    logging.basicConfig(level=level, handlers=[handler], force=True)

    for name, quiet_level in _QUIET.items():
        logging.getLogger(name).setLevel(quiet_level)
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.debug else logging.WARNING
    )

    get_logger(__name__).info(
        "Logging configured for %s at %s",
        settings.environment,
        logging.getLevelName(level),
    )


def get_logger(name: str) -> logging.Logger:
    """Logger for a module, usually called with ``__name__``."""
    return logging.getLogger(name)
