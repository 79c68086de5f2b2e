# -*- coding: utf-8 -*-
"""
Patient treatment API

Registers patients and moves them through the treatment workflow
(waiting -> curing -> cured / canceled). Records live in memory for the
lifetime of the process.
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from . import __version__
from .config import Settings, settings as default_settings
from .logging_config import setup_logging
from .patients.api import router as patients_router
from .patients.errors import PatientError
from .patients.storage import RecordStore
from .patients.workflow import TreatmentWorkflow

logger = logging.getLogger(__name__)


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _describe_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        msg = err.get("msg", "invalid value")
        parts.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(parts) or "Invalid request body"


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application with a fresh, empty record store."""
    settings = settings or default_settings

    app = FastAPI(
        title=settings.app_title,
        description="Patient registration and treatment status tracking",
        version=__version__,
        docs_url=settings.docs_url,
        redoc_url=None,
        openapi_url=f"{settings.docs_url.rstrip('/')}/openapi.json",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    store = RecordStore()
    app.state.store = store
    app.state.workflow = TreatmentWorkflow(store)

    @app.exception_handler(PatientError)
    async def _patient_error_handler(request: Request, exc: PatientError):
        logger.info("%s %s rejected (%s): %s", request.method, request.url.path, exc.status_code, exc.message)
        return _error_response(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def _validation_error_handler(request: Request, exc: RequestValidationError):
        message = _describe_validation_errors(exc)
        logger.info("%s %s rejected (400): %s", request.method, request.url.path, message)
        return _error_response(400, message)

    app.include_router(patients_router)

    @app.get("/api/health")
    def health() -> dict:
        return {"ok": True, "patients": len(store)}

    return app


app = create_app()


def run() -> None:
    """Console entry point (used by pyproject [project.scripts])."""
    import uvicorn

    setup_logging(default_settings.log_level, json_format=default_settings.log_json)
    logger.info("Server is running on port %s...", default_settings.port)
    uvicorn.run("patient_tracker.api:app", host=default_settings.host, port=default_settings.port, reload=False)
