"""Logfire setup and instrumentation hooks.

Spans and events are emitted directly with ``logfire`` throughout the
services; this module only decides where they go and which libraries are
traced automatically.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from threads.config import Settings

SERVICE_NAME = "threads-backend"


def _send_to_logfire(settings: Settings) -> bool:
    explicit = settings.observability.send_to_logfire
    if explicit is not None:
        return explicit
    return bool(settings.observability.logfire_token)


def configure_logfire(settings: Settings) -> bool:
    """Configure Logfire for this process.

    Tests get no console output; every other environment prints spans to
    the console, with cloud export when a token is present or
    ``OBSERVABILITY__SEND_TO_LOGFIRE`` forces it.

    Returns:
        Whether spans are exported to Logfire cloud
    """
    send = _send_to_logfire(settings)
    console: logfire.ConsoleOptions | bool = False
    if settings.environment != "test":
        console = logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        )

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=settings.git_sha,
        environment=settings.environment,
        send_to_logfire=send,
        token=settings.observability.logfire_token,
        console=console,
    )
    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send,
    )
    return send


def instrument_fastapi(app: FastAPI) -> None:
    """Trace requests handled by the API, tagged with method and path."""

    def _request_attributes(request, attributes):
        return {
            **attributes,
            "method": getattr(request, "method", None),
            "path": request.url.path if hasattr(request, "url") else None,
        }

    logfire.instrument_fastapi(app, request_attributes_mapper=_request_attributes)


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace statements run through the shared engine."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)


def instrument_httpx() -> None:
    """Trace outbound calls to the frontend revalidation endpoint."""
    logfire.instrument_httpx()
