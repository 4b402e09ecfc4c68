import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from paperpilot.errors import PaperPilotError, UpstreamError

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """Every error leaves the API as ``{"error": ..., "details"?: ...}``."""

    @app.exception_handler(PaperPilotError)
    async def paperpilot_error(request: Request, exc: PaperPilotError):
        content = {"error": exc.message}
        if isinstance(exc, UpstreamError):
            logger.error(f"❌ {request.method} {request.url.path}: {exc.message} ({exc.details})")
            if exc.details:
                content["details"] = exc.details
        else:
            logger.info(f"{request.method} {request.url.path} -> {exc.status_code} {exc.message}")
        return JSONResponse(status_code=exc.status_code, content=content)

    @app.exception_handler(RequestValidationError)
    async def request_validation_error(request: Request, exc: RequestValidationError):
        logger.info(f"{request.method} {request.url.path} -> 400 {exc.errors()}")
        return JSONResponse(status_code=400, content={"error": "Invalid request body"})

    @app.exception_handler(Exception)
    async def unhandled_error(request: Request, exc: Exception):
        logger.exception(f"❌ Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(status_code=500, content={"error": "Internal server error"})
