"""Client-side components for talking to a task server."""

from taskapi.client.client import TaskClient
from taskapi.client.errors import (
    TaskClientError,
    TaskClientHTTPError,
    TaskClientJSONError,
)


__all__ = [
    'TaskClient',
    'TaskClientError',
    'TaskClientHTTPError',
    'TaskClientJSONError',
]
