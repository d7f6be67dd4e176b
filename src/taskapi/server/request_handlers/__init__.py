"""Request handler components for the task server."""

from taskapi.server.request_handlers.default_request_handler import (
    DefaultRequestHandler,
)
from taskapi.server.request_handlers.request_handler import RequestHandler


__all__ = [
    'DefaultRequestHandler',
    'RequestHandler',
]
