# =============================================================================
# app/routers/health.py - Health Check Endpoints
# =============================================================================
# Provides health check endpoints for monitoring, load balancers and the CI
# smoke test. GET /health must answer within 2 seconds even when the database
# hangs, so the database probe runs in a worker thread under a timeout.
# =============================================================================

import asyncio
import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from datetime import datetime, timezone
from typing import Literal

from fastapi import APIRouter
from pydantic import BaseModel

from app.config import settings
from lib.supabase_client import SupabaseClient

logger = logging.getLogger(__name__)

router = APIRouter()

API_VERSION = "1.0.0"

# One dedicated thread for database probes. Each probe is also cut off by the
# Supabase client's own HTTP timeout (DATABASE_TIMEOUT_SECONDS).
_check_executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="db-check")
_check_lock = threading.Lock()
_inflight_check: Future | None = None


# =============================================================================
# Response Models
# =============================================================================

class HealthResponse(BaseModel):
    """Health check response."""
    status: Literal["healthy"]
    database: Literal["connected", "disconnected"]
    timestamp: str
    environment: str
    version: str


class LivenessResponse(BaseModel):
    """Liveness check response."""
    status: str
    timestamp: str


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _start_check() -> Future:
    """
    Return the in-flight probe, or submit a new one.

    Polls that arrive while a probe is stuck wait on that same probe, so a
    hanging database ties up at most one thread.
    """
    global _inflight_check
    with _check_lock:
        if _inflight_check is None or _inflight_check.done():
            _inflight_check = _check_executor.submit(SupabaseClient.check_connection)
        return _inflight_check


async def probe_database() -> bool:
    """True when the database answered within HEALTH_CHECK_TIMEOUT_SECONDS."""
    try:
        await asyncio.wait_for(
            asyncio.shield(asyncio.wrap_future(_start_check())),
            timeout=settings.HEALTH_CHECK_TIMEOUT_SECONDS,
        )
        return True
    except asyncio.TimeoutError:
        logger.warning(f"Database probe timed out after {settings.HEALTH_CHECK_TIMEOUT_SECONDS}s")
    except Exception as e:
        logger.warning(f"Database probe failed: {e}")
    return False


# =============================================================================
# Endpoints
# =============================================================================

@router.get("/health", response_model=HealthResponse)
async def health_check():
    """
    Health check endpoint.

    The API itself is always reported healthy; `database` tells whether
    Supabase answered.
    """
    connected = await probe_database()

    return HealthResponse(
        status="healthy",
        database="connected" if connected else "disconnected",
        timestamp=_now(),
        environment=settings.ENVIRONMENT,
        version=API_VERSION,
    )


@router.get("/health/live", response_model=LivenessResponse)
async def liveness_check():
    """
    Liveness check endpoint.

    Returns whether the service process is alive, without touching the
    database. Used by Docker/Kubernetes for restart decisions.
    """
    return LivenessResponse(
        status="alive",
        timestamp=_now(),
    )
