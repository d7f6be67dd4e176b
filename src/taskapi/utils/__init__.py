"""Utility functions for the task service."""

from taskapi.utils.errors import (
    InvalidRequestBodyError,
    TaskAPIError,
    TaskNotFoundError,
    TaskValidationError,
)
from taskapi.utils.task import (
    new_task,
    seed_tasks,
    validate_task_name,
)


__all__ = [
    'InvalidRequestBodyError',
    'TaskAPIError',
    'TaskNotFoundError',
    'TaskValidationError',
    'new_task',
    'seed_tasks',
    'validate_task_name',
]
