"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

import redis
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.gzip import GZipMiddleware
from sqlalchemy import text

from app.config import get_settings
from app.models.base import engine, AsyncSessionLocal, Base
from app.models.profile import Profile  # noqa: F401
from app.models.like import Like  # noqa: F401
from app.models.match import Match  # noqa: F401
from app.api.v1 import router as api_v1_router

logger = logging.getLogger(__name__)
settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown."""
    logger.info("Starting %s...", settings.app_name)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables verified")
    yield
    logger.info("Shutting down...")
    await engine.dispose()


app = FastAPI(
    title=settings.app_name,
    description="Readiness scoring and match formation for the Kinnect dating app",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(GZipMiddleware, minimum_size=500)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routers
app.include_router(api_v1_router)


@app.get("/health")
async def health_check():
    return {"status": "healthy", "app": settings.app_name}


async def _check_database() -> dict:
    try:
        async with AsyncSessionLocal() as session:
            await session.execute(text("SELECT 1"))
        return {"ok": True}
    except Exception as e:
        return {"ok": False, "message": str(e)}


def _check_redis() -> dict:
    try:
        redis.from_url(settings.redis_url, socket_timeout=5).ping()
        return {"ok": True}
    except Exception as e:
        return {"ok": False, "message": str(e)}


def _check_reconcile_workers() -> dict:
    """The periodic reconciler is the only consumer of the worker pool."""
    try:
        from app.tasks.celery_app import celery_app
        active = celery_app.control.inspect(timeout=5).active() or {}
        return {"ok": bool(active), "workers": sorted(active)}
    except Exception as e:
        return {"ok": False, "message": str(e)}


@app.get("/health/detailed")
async def detailed_health_check():
    checks = {
        "database": await _check_database(),
        "redis": _check_redis(),
        "reconcile_workers": _check_reconcile_workers(),
    }
    status = "healthy" if all(c["ok"] for c in checks.values()) else "degraded"

    return {
        "status": status,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "checks": checks,
    }
