"""Global error handlers: consistent JSON error responses."""

import structlog
from fastapi import FastAPI, HTTPException, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = structlog.get_logger()


def internal_error(message: str, exc: Exception) -> HTTPException:
    """500 carrying a summary message and the underlying error text."""
    return HTTPException(status_code=500, detail={"message": message, "error": str(exc)})


def setup_error_handlers(app: FastAPI) -> None:
    """Register global exception handlers."""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(_request: Request, exc: StarletteHTTPException) -> JSONResponse:
        """Handle HTTP exceptions; every body carries a ``message``."""
        content = exc.detail if isinstance(exc.detail, dict) else {"message": exc.detail}
        return JSONResponse(
            status_code=exc.status_code,
            content=content,
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(_request: Request, exc: RequestValidationError) -> JSONResponse:
        """Malformed request bodies are client errors."""
        return JSONResponse(
            status_code=400,
            content={"message": "Validation error", "errors": _jsonable_errors(exc)},
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Catch-all for unhandled exceptions; always returns JSON."""
        logger.error(
            "unhandled_exception",
            path=request.url.path,
            method=request.method,
            error=str(exc),
            exc_info=exc,
        )
        return JSONResponse(
            status_code=500,
            content={"message": "Internal server error"},
        )


def _jsonable_errors(exc: RequestValidationError) -> list[dict[str, object]]:
    # ctx may hold exception instances; input is raw bytes for non-JSON bodies
    errors = []
    for err in exc.errors():
        err = {k: v for k, v in err.items() if k != "ctx"}
        if isinstance(err.get("input"), bytes):
            err["input"] = err["input"].decode("utf-8", errors="replace")
        errors.append(err)
    return jsonable_encoder(errors)
