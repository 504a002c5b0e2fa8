"""
=============================================================================
MOVIES API
=============================================================================
CRUD over an in-memory movie catalog:
  - Catalog loaded once at startup from a static JSON file
  - Full/partial schema validation of request bodies
  - Origin allow-list CORS policy applied at the middleware layer
=============================================================================
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime

from fastapi import Depends, FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException
from fastapi.exceptions import RequestValidationError

from .config import settings
from .cors import CorsPolicy
from .dependencies import close_resources, get_movie_repository, init_resources
from .exceptions import (
    MovieNotFoundError,
    MovieValidationError,
    global_exception_handler,
    http_exception_handler,
    movie_not_found_exception_handler,
    movie_validation_exception_handler,
    request_validation_exception_handler,
)
from .logging_config import setup_logging
from .middleware import CorsPolicyMiddleware, RequestTrackingMiddleware
from .repositories.movie_repository import MovieRepository
from .routers import movie_router

VERSION = "1.0.0"

setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_resources()
    logger.info(f"server listening on http://localhost:{settings.PORT}")
    yield
    close_resources()


app = FastAPI(
    title="Movies API",
    description="CRUD over an in-memory movie catalog",
    version=VERSION,
    lifespan=lifespan,
)

# =============================================================================
# MIDDLEWARE (last added runs first)
# =============================================================================
app.add_middleware(
    CorsPolicyMiddleware,
    policy=CorsPolicy(settings.ACCEPTED_ORIGINS, settings.ALLOWED_METHODS),
)
app.add_middleware(RequestTrackingMiddleware)

# =============================================================================
# EXCEPTION HANDLERS
# =============================================================================
app.add_exception_handler(MovieValidationError, movie_validation_exception_handler)
app.add_exception_handler(MovieNotFoundError, movie_not_found_exception_handler)
app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(Exception, global_exception_handler)

app.include_router(movie_router.router)


@app.get("/health")
async def health_check(movie_repo: MovieRepository = Depends(get_movie_repository)):
    """Health check endpoint"""
    return {
        "status": "healthy",
        "timestamp": datetime.now().isoformat(),
        "version": VERSION,
        "movies": await movie_repo.count(),
    }


def run():
    import uvicorn

    uvicorn.run(
        "movies_api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        server_header=False,
        log_config=None,
    )


if __name__ == "__main__":
    run()
