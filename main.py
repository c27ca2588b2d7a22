"""
League Statistics Service

FastAPI server exposing read-only season statistics, standings and
leaderboards for basketball leagues. Everything is derived on read from
completed games and box score lines.

Usage:
    uvicorn main:app --host 0.0.0.0 --port 8001

Environment Variables:
    API_TOKEN - Required secret token for authentication
    DATABASE_URL - Database connection (postgresql://... or sqlite:///...)
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from api.v1 import statistics
from core.correlation_middleware import CorrelationMiddleware
from core.logging import setup_logging, get_logger
from core.middleware import setup_middleware
from core.settings import settings
from db.base import close_db, init_db
from schemas.common import HealthResponse, now_timestamp


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(
        log_level=settings.log_level,
        json_format=settings.log_format == "json",
        service_name=settings.service_name,
    )
    log = get_logger()
    log.info("stats_service_starting", service=settings.service_name)

    init_db()

    yield

    close_db()
    log.info("stats_service_stopped")


app = FastAPI(
    title="League Statistics Service",
    description="Season statistics, standings and leaderboards for basketball leagues",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs" if settings.development_mode else None,
    redoc_url=None,
)

# Middlewares (order matters, last added is outermost)
app.add_middleware(CorrelationMiddleware)
setup_middleware(app)

app.include_router(statistics.router, prefix="/v1")


@app.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint (no auth required)."""
    return HealthResponse(status="healthy", timestamp=now_timestamp())


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8001)
