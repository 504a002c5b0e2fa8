from typing import Any, Dict, List

from fastapi import Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException
import logging

logger = logging.getLogger(__name__)

class MoviesApiException(Exception):
    """Base exception for the application"""
    pass

class MovieValidationError(MoviesApiException):
    """A payload failed the movie schema; carries one entry per failing field."""
    def __init__(self, errors: List[Dict[str, Any]]):
        super().__init__(f"{len(errors)} invalid field(s)")
        self.errors = errors

class MovieNotFoundError(MoviesApiException):
    def __init__(self, movie_id: str, message: str = "Movie not found", body_key: str = "message"):
        super().__init__(message)
        self.movie_id = movie_id
        self.message = message
        self.body_key = body_key

class SeedDataError(MoviesApiException):
    pass

def request_context(request: Request) -> Dict[str, Any]:
    """Log fields describing the movie request being served."""
    context = {
        "request_id": getattr(request.state, "request_id", "unknown"),
        "method": request.method,
        "path": request.url.path,
    }
    movie_id = request.scope.get("path_params", {}).get("movie_id")
    if movie_id is not None:
        context["movie_id"] = movie_id
    return context

def _error_response(request: Request, status_code: int, content: Dict[str, Any], headers=None) -> JSONResponse:
    content["request_id"] = getattr(request.state, "request_id", "unknown")
    return JSONResponse(status_code=status_code, content=content, headers=headers)

async def global_exception_handler(request: Request, exc: Exception):
    """
    Last resort for anything the movie handlers did not anticipate.
    The client gets a generic 500; the traceback only goes to the log.
    """
    logger.error(
        "Unhandled error while serving movie request",
        extra={**request_context(request), "error_type": type(exc).__name__},
        exc_info=exc
    )
    return _error_response(request, 500, {
        "error": "Internal Server Error",
        "message": "An unexpected error occurred. Please contact support.",
    })

async def movie_validation_exception_handler(request: Request, exc: MovieValidationError):
    logger.info(
        "Movie payload rejected",
        extra={**request_context(request), "fields": [err["field"] for err in exc.errors]}
    )
    return _error_response(request, 400, {"error": exc.errors})

async def movie_not_found_exception_handler(request: Request, exc: MovieNotFoundError):
    logger.info("Movie not found", extra={**request_context(request), "movie_id": exc.movie_id})
    return _error_response(request, 404, {exc.body_key: exc.message})

async def http_exception_handler(request: Request, exc: HTTPException):
    """
    Routing-level failures: unknown paths, methods a movie route does not support.
    """
    level = logging.ERROR if exc.status_code >= 500 else logging.INFO
    logger.log(
        level,
        f"HTTP {exc.status_code} on movie API",
        extra={**request_context(request), "status_code": exc.status_code, "detail": exc.detail}
    )
    return _error_response(
        request,
        exc.status_code,
        {"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )

async def request_validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Handle bodies FastAPI could not parse (malformed JSON, missing body).
    """
    logger.info("Malformed request body", extra={**request_context(request), "errors": exc.errors()})
    return _error_response(request, 400, {
        "error": "Malformed request body",
        "details": [
            {"loc": list(err.get("loc", ())), "msg": err.get("msg"), "type": err.get("type")}
            for err in exc.errors()
        ],
    })
