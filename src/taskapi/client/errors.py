"""Exceptions raised by `TaskClient`."""


class TaskClientError(Exception):
    """Base exception for task client errors."""


class TaskClientHTTPError(TaskClientError):
    """The server answered with an error status, or could not be reached.

    `message` holds the server's plain-text error body, e.g.
    `'The task with the provided ID does not exist.'`. Transport failures
    are reported with status 503.
    """

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f'HTTP Error {status_code}: {message}')

    @property
    def is_not_found(self) -> bool:
        """Whether the requested task does not exist on the server."""
        return self.status_code == 404

    @property
    def is_rejected(self) -> bool:
        """Whether the server refused the request body, e.g. a short name."""
        return self.status_code == 400


class TaskClientJSONError(TaskClientError):
    """A response could not be decoded into tasks."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(f'JSON Error: {message}')
