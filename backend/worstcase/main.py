"""
Solar worst-case analysis — FastAPI application entry point.

Run with::

    uvicorn worstcase.main:app
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from worstcase.api.router import router
from worstcase.config import WINDOW_HOURS, configure_logging, settings

log = logging.getLogger(__name__)


def create_app() -> FastAPI:
    configure_logging()

    app = FastAPI(
        title="Solar Worst-Case API",
        description="Worst-case rolling irradiance and temperature windows for off-grid sizing",
        version="0.1.0",
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )
    app.include_router(router)

    @app.get("/health")
    async def health_check():
        return {
            "status": "ok",
            "service": "solar-worst-case",
            "window_hours": list(WINDOW_HOURS),
            "data_directory_configured": bool(settings.DATA_DIRECTORY),
        }

    log.info("API ready; CORS origins: %s", ", ".join(settings.CORS_ORIGINS))
    return app


app = create_app()
