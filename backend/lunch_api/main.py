"""
FastAPI application for the What's For Lunch backend.

Provides REST endpoints for:
- Getting today's lunch for a building as a Mattermost command response
- Listing the supported buildings
- Health checks

Run with:
    cd backend
    uvicorn lunch_api.main:app --reload --port 8080
or, once installed:
    whats-for-lunch
"""

import logging
import time
from contextlib import asynccontextmanager
from datetime import datetime

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import RedirectResponse
from pydantic import BaseModel

from .routes import lunch
from .services.config import configure_logging, get_host, get_port, get_upstream_url


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Logs the upstream site on startup and announces shutdown.
    """
    logger.info(f"Serving lunch menus from {get_upstream_url()}")
    yield
    logger.info("Shutting down")


app = FastAPI(
    title="What's For Lunch API",
    description="Today's canteen lunch menu as Mattermost slash command responses",
    version="1.0.0",
    lifespan=lifespan,
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log method, path, status and duration of every request."""
    start = time.perf_counter()
    response = await call_next(request)
    duration_ms = (time.perf_counter() - start) * 1000
    logger.info(
        f"{request.method} {request.url.path} -> {response.status_code} ({duration_ms:.0f} ms)"
    )
    return response


# Include routers
app.include_router(lunch.router)


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    timestamp: datetime
    upstream: str


@app.get("/api/health", response_model=HealthResponse, tags=["health"])
def health_check():
    """
    Health check endpoint.

    Does not contact the upstream site.
    """
    return HealthResponse(
        status="ok",
        timestamp=datetime.utcnow(),
        upstream=get_upstream_url(),
    )


@app.get("/", include_in_schema=False)
def root():
    """Redirect to the interactive API documentation."""
    return RedirectResponse(url="/docs", status_code=308)


def run() -> None:
    """Start the server on the configured host and port."""
    configure_logging()
    host, port = get_host(), get_port()
    logger.info(f"Listening on {host}:{port}")
    uvicorn.run(app, host=host, port=port, log_config=None)


if __name__ == "__main__":
    run()
