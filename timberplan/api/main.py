"""FastAPI application factory."""

from __future__ import annotations
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from timberplan.api.routes import router
from timberplan.config import configure_logging, get_settings
from timberplan.core.errors import ConstructionError, OptimizationExhausted

logger = logging.getLogger(__name__)


async def _construction_error(request: Request, exc: ConstructionError) -> JSONResponse:
    logger.info("Rejected %s: %s", request.url.path, exc)
    return JSONResponse(status_code=422, content={"detail": str(exc)})


async def _optimization_exhausted(request: Request, exc: OptimizationExhausted) -> JSONResponse:
    logger.warning("Dimension search exhausted: %s", exc)
    return JSONResponse(
        status_code=422,
        content={
            "detail": str(exc),
            "failing": exc.result.failing,
            "sections": exc.result.parameters.sections.model_dump(),
        },
    )


async def _validation_error(request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content={"detail": exc.errors(include_url=False, include_context=False, include_input=False)},
    )


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings)

    app = FastAPI(
        title=settings.app_name,
        description="Dimensioned construction plans for timber carports and garden houses",
        version=settings.version,
    )

    # CORS for the browser frontend
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ConstructionError, _construction_error)
    app.add_exception_handler(OptimizationExhausted, _optimization_exhausted)
    app.add_exception_handler(ValidationError, _validation_error)

    app.include_router(router, prefix="/api")

    return app


app = create_app()
