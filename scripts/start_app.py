#!/usr/bin/env python3
"""Serve the threads API with uvicorn.

Startup failures are reported to Logfire before the process exits, since
they happen before request instrumentation is in place.
"""

import sys

import logfire
import uvicorn

from threads.config import Settings
from threads.util.logging import setup_logging
from threads.util.observability import configure_logfire

APP_PATH = "threads.interface.api.app:app"


def main() -> int:
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    reload = settings.environment == "development"
    logfire.info(
        "Starting threads API",
        port=settings.port,
        reload=reload,
        consistency_mode=settings.database.consistency_mode.value,
    )
    try:
        uvicorn.run(
            APP_PATH,
            host="0.0.0.0",
            port=settings.port,
            reload=reload,
            log_level="debug" if settings.debug else "info",
        )
    except Exception as e:
        logfire.error(
            "Threads API failed to start",
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
