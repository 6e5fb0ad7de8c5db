"""CORS headers middleware for Tasklist.

Adds permissive CORS headers to every response, including error responses
and requests without an ``Origin`` header, and answers every ``OPTIONS`` request
directly with 200.
"""

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from tasklist.core.config import get_settings


class CORSHeadersMiddleware(BaseHTTPMiddleware):
    """Middleware to add CORS headers to all responses.

    Headers added:
    - Access-Control-Allow-Origin: the configured origin (``*`` by default)
    - Access-Control-Allow-Methods: the configured methods
    - Access-Control-Allow-Headers: includes the token and ``_id`` headers
    - Access-Control-Expose-Headers: the two token headers, so browsers can
      read them from signup, login and refresh responses
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        """Process the request and add CORS headers to the response."""
        if request.method == "OPTIONS":
            response = Response(status_code=200)
        else:
            response = await call_next(request)

        self.apply_headers(response)
        return response

    @staticmethod
    def apply_headers(response: Response) -> None:
        settings = get_settings()
        response.headers["Access-Control-Allow-Origin"] = settings.cors_allow_origin
        response.headers["Access-Control-Allow-Methods"] = ", ".join(settings.cors_allow_methods)
        response.headers["Access-Control-Allow-Headers"] = ", ".join(settings.cors_allow_headers)
        response.headers["Access-Control-Expose-Headers"] = ", ".join(settings.cors_expose_headers)
