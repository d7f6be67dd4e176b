"""Utility functions for building and checking Task objects."""

from taskapi.types import Task, TaskCreate
from taskapi.utils.errors import TaskValidationError


MIN_NAME_LENGTH = 3


def _utf16_length(value: str) -> int:
    return len(value.encode('utf-16-le', 'surrogatepass')) // 2


def validate_task_name(name: str | None) -> str:
    """Checks that a task name is present and long enough.

    Length is counted in UTF-16 code units, the way JavaScript clients
    measure strings, so a character outside the BMP counts as two.

    Args:
        name: The candidate name, `None` when the request omitted it.

    Returns:
        The name, unchanged.

    Raises:
        TaskValidationError: If the name is missing or shorter than
            `MIN_NAME_LENGTH` code units.
    """
    if name is None or _utf16_length(name) < MIN_NAME_LENGTH:
        raise TaskValidationError()
    return name


def new_task(task_id: int, params: TaskCreate) -> Task:
    """Creates a Task object from a validated creation payload.

    Args:
        task_id: The id assigned by the store.
        params: The `TaskCreate` payload.

    Returns:
        A new `Task`.
    """
    return Task(
        id=task_id,
        name=validate_task_name(params.name),
        completed=params.completed,
    )


def seed_tasks() -> list[Task]:
    """Returns the tasks a freshly started server is populated with."""
    return [
        Task(id=1, name='Task 1', completed=False),
        Task(id=2, name='Task 2', completed=False),
        Task(id=3, name='Task 3', completed=False),
    ]
