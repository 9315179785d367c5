import logging

from fastapi import Request, FastAPI
from fastapi.responses import JSONResponse
from .exceptions import APIException

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI):
    @app.exception_handler(APIException)
    async def api_exception_handler(request: Request, exc: APIException):
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "error": exc.detail,
                "status_code": exc.status_code,
                "path": request.url.path,
                "method": request.method
            },
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        # Internals stay in the log, never in the response body
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(
            status_code=500,
            content={
                "error": "An unexpected error occurred.",
                "status_code": 500,
                "path": request.url.path,
                "method": request.method
            },
        )
