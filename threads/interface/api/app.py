"""FastAPI application."""

from contextlib import asynccontextmanager

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from threads.config import Settings
from threads.interface.api.routes import activity, health, users
from threads.interface.api.routes import threads as thread_routes
from threads.util.di.container import create_container, setup_di
from threads.util.logging import get_logger
from threads.util.observability import instrument_fastapi, instrument_httpx

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    logger.info("Shutting down, closing DI container")
    # Disposes the database engine
    await app.state.dishka_container.close()


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Logfire should be configured before calling this function; start_app.py
    does so in production.

    Args:
        container: DI container, the production container when omitted
    """
    settings = Settings()

    instrument_httpx()

    app_instance = FastAPI(
        title="Threads API",
        description="Backend for a threaded discussion platform: posts, replies, profiles and communities",
        version="0.1.0",
        lifespan=lifespan,
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.frontend_url,
            "http://localhost:3000",  # Local development
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
        max_age=600,
    )

    setup_di(app_instance, container or create_container())

    app_instance.include_router(health.router)
    app_instance.include_router(thread_routes.router)
    app_instance.include_router(users.router)
    app_instance.include_router(activity.router)

    return app_instance


# App instance for uvicorn
app = create_app()
