# type: ignore
# pyright: reportGeneralTypeIssues=false
"""
Schedule Store Service
======================
Keeps standard (Operating / Closed) and special opening hours per calendar
day in memory and answers single-day and date-range queries with formatted
schedule records. Exposes Prometheus metrics.

Port: 8005
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from schedule_store.controllers import schedule_controller, system_controller
from schedule_store.core.config import settings
from schedule_store.core.logging import get_logger
from schedule_store.middleware import MetricsMiddleware, RequestIDMiddleware

logger = get_logger(settings.SERVICE_NAME)


# ── Lifespan ──────────────────────────────────────────────────────────────
@asynccontextmanager
async def lifespan(application: FastAPI):
    """Log startup and shutdown."""
    logger.info(
        "Schedule store starting — date_format=%s, time_format=%s, timezone=%s",
        settings.DEFAULT_DATE_FORMAT,
        settings.DEFAULT_TIME_FORMAT,
        settings.DEFAULT_TIMEZONE,
    )
    yield
    logger.info("Schedule store shutting down")


# ── FastAPI App ───────────────────────────────────────────────────────────
app = FastAPI(
    title="Schedule Store Service",
    description="Calendar-indexed opening hours with special-hours events.",
    version=settings.SERVICE_VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(MetricsMiddleware)
app.add_middleware(RequestIDMiddleware)


# ── Global exception handler ─────────────────────────────────────────────
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    req_id = getattr(request.state, "request_id", None)
    logger.exception("Unhandled exception", extra={"request_id": req_id})
    return JSONResponse(
        status_code=500,
        content={"error": "internal_server_error", "detail": str(exc), "request_id": req_id},
    )


app.include_router(system_controller.router)
app.include_router(schedule_controller.router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=settings.SERVICE_PORT, log_level="info")
