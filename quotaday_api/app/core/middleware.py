"""
Request logging middleware.

Every request is logged with the address of the client that sent it.
The service usually sits behind Cloudflare or a reverse proxy such as
Traefik, so the socket peer is the proxy; the real client address is
taken from the proxy headers when they are present.
"""

import logging
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)


def client_address(request: Request) -> str:
    """Return the best known address of the client behind ``request``.

    Precedence: ``Cf-Connecting-Ip`` (with the ``Cf-Ipcountry`` code),
    ``X-Real-Ip``, ``X-Forwarded-For``, then the socket peer.
    """
    headers = request.headers
    if remote := headers.get("cf-connecting-ip"):
        return f"{remote} ({headers.get('cf-ipcountry', '')})"
    if remote := headers.get("x-real-ip"):
        return remote
    if remote := headers.get("x-forwarded-for"):
        return remote
    if request.client:
        return f"{request.client.host}:{request.client.port}"
    return "unknown"


def remote_host_info(request: Request) -> str:
    """Format a one-line access log entry for ``request``."""
    user_agent = request.headers.get("user-agent", "")
    http_version = request.scope.get("http_version", "1.1")
    target = request.url.path
    if request.url.query:
        target = f"{target}?{request.url.query}"
    return f'{client_address(request)} "{user_agent}" - {request.method} HTTP/{http_version} "{target}"'


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log the client and request line of every request."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        logger.info(remote_host_info(request))
        return await call_next(request)
