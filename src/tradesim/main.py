"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from tradesim.config.settings import get_settings
from tradesim.config.logging_config import setup_logging
from tradesim.core.exceptions import AppError
from tradesim.repositories.sqlalchemy.database import get_session_factory, init_db
from tradesim.repositories.sqlalchemy import unit_of_work_factory
from tradesim.api.routers import (
    auth_router,
    stocks_router,
    portfolio_router,
    transactions_router,
    leaderboard_router,
)
from tradesim.services import AuthService, PriceSimulator, SimulatorRunner

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    settings = get_settings()
    setup_logging()
    init_db()

    open_uow = unit_of_work_factory(get_session_factory())
    simulator = PriceSimulator(
        open_uow,
        max_change_pct=settings.max_price_change_pct,
        min_price=settings.min_price,
    )
    app.state.simulator = simulator

    if settings.seed_on_startup:
        simulator.seed_if_empty()

    def purge_sessions() -> None:
        with open_uow() as uow:
            AuthService(uow).purge_expired_sessions()

    runner = None
    if settings.simulator_enabled:
        runner = SimulatorRunner(
            simulator,
            interval_seconds=settings.price_update_interval_seconds,
            after_tick=purge_sessions,
        )
        runner.start()

    yield

    # Shutdown
    if runner is not None:
        await runner.stop()


settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    description="Simulated stock trading with virtual cash and a leaderboard",
    version=settings.app_version,
    lifespan=lifespan,
)

# Include routers
app.include_router(auth_router)
app.include_router(stocks_router)
app.include_router(portfolio_router)
app.include_router(transactions_router)
app.include_router(leaderboard_router)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Global handler for application errors."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.code, "message": exc.message},
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed request bodies and query strings are client errors (400)."""
    return JSONResponse(
        status_code=400,
        content={
            "error": "VALIDATION_ERROR",
            "message": "Invalid request",
            "errors": jsonable_encoder(exc.errors()),
        },
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={"error": "INTERNAL_ERROR", "message": "Internal server error"},
    )


@app.get("/health")
def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/")
def root() -> dict[str, str]:
    """Root endpoint with API info."""
    return {
        "app": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
    }
