import time
import uuid
import logging
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from .cors import CorsPolicy
from .exceptions import request_context

logger = logging.getLogger(__name__)

class RequestTrackingMiddleware(BaseHTTPMiddleware):
    """
    Tags every movie request with a request id (taken from X-Request-ID
    when the caller sends one) and logs how long it took.
    """
    def __init__(self, app: ASGIApp):
        super().__init__(app)

    async def dispatch(self, request: Request, call_next):
        request.state.request_id = request.headers.get("X-Request-ID", str(uuid.uuid4()))
        start_time = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception:
            logger.error(
                "Movie request failed",
                extra={**request_context(request), "duration_ms": self._elapsed_ms(start_time)},
                exc_info=True
            )
            raise

        duration_ms = self._elapsed_ms(start_time)
        response.headers["X-Request-ID"] = request.state.request_id
        response.headers["X-Process-Time"] = str(duration_ms)

        logger.info(
            "Movie request completed",
            extra={
                **request_context(request),
                "status_code": response.status_code,
                "duration_ms": duration_ms,
                "origin": request.headers.get("origin"),
            }
        )
        return response

    @staticmethod
    def _elapsed_ms(start_time: float) -> float:
        return round((time.perf_counter() - start_time) * 1000, 2)

class CorsPolicyMiddleware(BaseHTTPMiddleware):
    """
    Applies the origin allow-list to every response. A rejected origin only
    loses the CORS headers; the browser does the blocking.
    """
    def __init__(self, app: ASGIApp, policy: CorsPolicy):
        super().__init__(app)
        self.policy = policy

    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)

        origin = request.headers.get("origin")
        allowed = self.policy.allow_origin(origin)
        if allowed is None:
            logger.info("Origin not allowed by CORS", extra={**request_context(request), "origin": origin})
            return response

        response.headers["Access-Control-Allow-Origin"] = allowed
        if origin:
            response.headers.add_vary_header("Origin")
        if request.method == "OPTIONS":
            response.headers["Access-Control-Allow-Methods"] = self.policy.allowed_methods

        return response
