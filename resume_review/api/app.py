from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from psycopg import OperationalError
from psycopg_pool import PoolTimeout

from resume_review.accounts.service import AccountService
from resume_review.api.routes import accounts, reviews
from resume_review.config.settings import Settings
from resume_review.database.connection import close_pool, ensure_schema, init_pool
from resume_review.database.repositories.user_repository import UserRepository
from resume_review.ingestion.pipeline import IngestionPipeline, build_pipeline
from resume_review.logging.logger import Log


def create_app(
    settings: Settings | None = None,
    *,
    pipeline: IngestionPipeline | None = None,
    account_service: AccountService | None = None,
) -> FastAPI:
    """Build the FastAPI application.

    Collaborators that are not injected are constructed once in the lifespan
    handler and shared by every request. An injected account service skips
    database setup entirely.
    """
    settings = settings if settings is not None else Settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        Log.configure(settings.log_level)
        owns_pool = account_service is None
        if owns_pool:
            _open_database(settings)
        app.state.pipeline = pipeline if pipeline is not None else build_pipeline(settings)
        app.state.account_service = (
            account_service if account_service is not None else AccountService(UserRepository())
        )
        Log.info(
            f"Resume review service ready on http://{settings.host}:{settings.port}",
            env=settings.app_env,
            provider=settings.analysis_provider,
            pdf_engine=settings.pdf_engine,
        )
        try:
            yield
        finally:
            await app.state.pipeline.aclose()
            if owns_pool:
                close_pool()
            Log.info("Resume review service stopped")

    app = FastAPI(title="Resume Review", lifespan=lifespan)
    app.state.settings = settings
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(reviews.router)
    app.include_router(accounts.router)
    return app


def _open_database(settings: Settings) -> None:
    """Open the pool and apply the schema; account routes fail until the DB is reachable."""
    init_pool(settings)
    try:
        ensure_schema()
    except (OperationalError, PoolTimeout) as exc:
        Log.error(f"Database unavailable at startup, will retry on demand: {exc}")
