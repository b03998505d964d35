from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from infrastructure.i18n.errors import StoreUnavailableError
from infrastructure.logging import get_module_logger

logger = get_module_logger()


async def store_unavailable_handler(request: Request, exc: Exception):
    """Return 503 when the translation store cannot be reached."""
    logger.error(
        "translation_store_request_failed",
        path=request.url.path,
        error=str(exc),
        error_code=getattr(exc, "error_code", None),
    )
    return JSONResponse(
        status_code=503,
        content={"detail": "Translation store unavailable"},
    )


def setup_error_handlers(app: FastAPI):
    """
    Map translation pipeline errors to HTTP responses.
    """
    app.add_exception_handler(StoreUnavailableError, store_unavailable_handler)
