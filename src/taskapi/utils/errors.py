"""Custom exceptions for task server-side errors."""

NAME_TOO_SHORT_MESSAGE = 'The name should be at least 3 chars long!'
TASK_NOT_FOUND_MESSAGE = 'The task with the provided ID does not exist.'
INVALID_JSON_MESSAGE = 'The request body is not valid JSON.'


class TaskAPIError(Exception):
    """Base exception for errors reported back to the HTTP caller.

    Each subclass carries the status code and the plain-text body the
    server answers with.
    """

    status_code: int = 500

    def __init__(self, message: str):
        """Initializes the TaskAPIError.

        Args:
            message: The text sent back as the response body.
        """
        self.message = message
        super().__init__(message)


class TaskNotFoundError(TaskAPIError):
    """Raised when no task with the requested id exists."""

    status_code = 404

    def __init__(self, message: str = TASK_NOT_FOUND_MESSAGE):
        super().__init__(message)


class TaskValidationError(TaskAPIError):
    """Raised when a task name is missing or shorter than three characters."""

    status_code = 400

    def __init__(self, message: str = NAME_TOO_SHORT_MESSAGE):
        super().__init__(message)


class InvalidRequestBodyError(TaskAPIError):
    """Raised when the request body cannot be parsed into a task payload."""

    status_code = 400

    def __init__(self, message: str = INVALID_JSON_MESSAGE):
        super().__init__(message)
