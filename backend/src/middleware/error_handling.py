"""
Error handling middleware.
Centralizes error handling and response formatting.
"""
import json
import logging
from typing import Callable, Optional

from fastapi import Request, Response, status
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from src.services.errors import ServiceError

logger = logging.getLogger(__name__)


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """Middleware for centralized error handling and logging."""

    def _get_request_body(self, request: Request) -> Optional[dict]:
        """
        Request body cached by the request logging middleware, if any.
        """
        try:
            body_bytes = getattr(request.state, "body", None)
            if not body_bytes:
                return None

            body_str = body_bytes.decode("utf-8")
            return json.loads(body_str)
        except Exception:
            return None

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            response = await call_next(request)
            return response

        except ServiceError as e:
            body = self._get_request_body(request)
            log = logger.warning if e.status_code < 500 else logger.error

            log(
                f"{type(e).__name__}: {e}",
                extra={
                    "path": request.url.path,
                    "method": request.method,
                    "error_type": type(e).__name__,
                    "request_body": body,
                },
            )
            return JSONResponse(
                status_code=e.status_code,
                content={"error": str(e)},
            )

        except Exception as e:
            body = self._get_request_body(request)

            logger.error(
                "Unhandled error",
                extra={
                    "path": request.url.path,
                    "method": request.method,
                    "error": str(e),
                    "error_type": type(e).__name__,
                    "request_body": body,
                },
                exc_info=True,
            )
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"error": str(e) or "Internal error"},
            )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> PlainTextResponse:
    """Render routing errors (404, 405) as plain text reason phrases."""
    return PlainTextResponse(
        exc.detail,
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )
