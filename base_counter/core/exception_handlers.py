from fastapi import FastAPI
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..shared.errors import CounterError
from ..shared.utils.logger import get_logger

logger = get_logger(__name__)


def error_response(status_code: int, message) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": message},
    )


def setup_exception_handlers(app: FastAPI):
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request, exc):
        return error_response(exc.status_code, exc.detail)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request, exc):
        return JSONResponse(
            status_code=422,
            content={"success": False, "error": "Invalid request", "details": jsonable_encoder(exc.errors())},
        )

    @app.exception_handler(CounterError)
    async def counter_exception_handler(request, exc: CounterError):
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
        return error_response(exc.status_code, exc.message)

    @app.exception_handler(Exception)
    async def generic_exception_handler(request, exc):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return error_response(500, "Internal server error")
