"""FastAPI application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mathcards.config import configure_logging, get_settings
from mathcards.database import dispose_engine
from mathcards.infrastructure.common.error_handlers import register_exception_handlers
from mathcards.infrastructure.identity.dependencies import get_current_owner, get_identity_verifier
from mathcards.infrastructure.learning.routers import flashcards, tags


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    yield
    if get_identity_verifier.cache_info().currsize:
        await get_identity_verifier().close()
    dispose_engine()


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings.ENVIRONMENT)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        description="Flashcards with tags and math markup",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Every API route is behind the auth gate
    api_dependencies = [Depends(get_current_owner)]
    app.include_router(flashcards.router, prefix=settings.API_PREFIX, dependencies=api_dependencies)
    app.include_router(tags.router, prefix=settings.API_PREFIX, dependencies=api_dependencies)

    @app.get("/health", tags=["system"])
    def health() -> dict[str, str]:
        return {"status": "ok"}

    return app


app = create_app()
