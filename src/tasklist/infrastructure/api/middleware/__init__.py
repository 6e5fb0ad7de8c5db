"""HTTP middleware for Tasklist."""

from tasklist.infrastructure.api.middleware.cors_headers_middleware import (
    CORSHeadersMiddleware,
)

__all__ = ["CORSHeadersMiddleware"]
