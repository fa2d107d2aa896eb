"""
CORS middleware.
Attaches permissive cross-origin headers to every response and answers
preflight requests before routing.
"""
from typing import Callable, List, Tuple

from fastapi import Request, Response, status
from starlette.middleware.base import BaseHTTPMiddleware


class CORSHeadersMiddleware(BaseHTTPMiddleware):
    """Middleware adding fixed CORS headers to all responses.

    Unlike Starlette's ``CORSMiddleware``, headers are sent whether or not the
    request carries an ``Origin`` header, and any ``OPTIONS`` request is
    answered with 204 even when the path is not routed.
    """

    def __init__(self, app, headers: List[Tuple[str, str]]):
        super().__init__(app)
        self.headers = headers

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if request.method == "OPTIONS":
            return Response(status_code=status.HTTP_204_NO_CONTENT, headers=dict(self.headers))

        response = await call_next(request)
        for name, value in self.headers:
            response.headers[name] = value
        return response
