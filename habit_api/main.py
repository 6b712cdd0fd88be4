from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from habit_analytics.errors import AnalyticsError, DuplicateRecord
from habit_api.logging_config import configure_logging
from habit_api.routes import falls, stats, streaks, wake

logger = logging.getLogger("habit_api")


def create_app() -> FastAPI:
    configure_logging()
    app = FastAPI(title="Habit Analytics API", version="0.1.0")

    app.include_router(streaks.router)
    app.include_router(stats.router)
    app.include_router(falls.router)
    app.include_router(wake.router)

    @app.exception_handler(DuplicateRecord)
    async def _duplicate_record_handler(request: Request, exc: DuplicateRecord):
        logger.warning("Rejected snapshot: %s", exc)
        return JSONResponse(
            status_code=409,
            content={"detail": str(exc), "subject_id": exc.subject_id, "date": exc.date},
        )

    @app.exception_handler(AnalyticsError)
    async def _analytics_error_handler(request: Request, exc: AnalyticsError):
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(Exception)
    async def _unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled exception: %s", exc)
        return JSONResponse(status_code=500, content={"detail": "Internal error"})

    @app.get("/health")
    async def health():
        return {"ok": True}

    return app


app = create_app()
