from abc import ABC, abstractmethod

from taskapi.types import Task, TaskCreate, TaskPatch, TaskReplace


class RequestHandler(ABC):
    """Task request handler interface.

    This interface defines the methods that a task server implementation
    must provide to serve the `/api/tasks` routes. Errors are reported by
    raising a `TaskAPIError` subclass.
    """

    @abstractmethod
    async def on_list_tasks(self) -> list[Task]:
        """Handles `GET /api/tasks`.

        Returns:
            Every task, in insertion order.
        """

    @abstractmethod
    async def on_get_task(self, task_id: int) -> Task:
        """Handles `GET /api/tasks/{id}`.

        Args:
            task_id: The ID taken from the request path.

        Returns:
            The matching `Task`.

        Raises:
            TaskNotFoundError: If no task has this ID.
        """

    @abstractmethod
    async def on_create_task(self, params: TaskCreate) -> Task:
        """Handles `POST /api/tasks`.

        Args:
            params: The parsed request body.

        Returns:
            The created `Task`, with its assigned ID.

        Raises:
            TaskValidationError: If the name is missing or too short.
        """

    @abstractmethod
    async def on_replace_task(self, task_id: int, params: TaskReplace) -> Task:
        """Handles `PUT /api/tasks/{id}`.

        Raises:
            TaskNotFoundError: If no task has this ID.
            TaskValidationError: If the name is missing or too short.
        """

    @abstractmethod
    async def on_patch_task(self, task_id: int, params: TaskPatch) -> Task:
        """Handles `PATCH /api/tasks/{id}`.

        Raises:
            TaskNotFoundError: If no task has this ID.
            TaskValidationError: If a name is given and it is too short.
        """

    @abstractmethod
    async def on_delete_task(self, task_id: int) -> Task:
        """Handles `DELETE /api/tasks/{id}`.

        Returns:
            The removed `Task`.

        Raises:
            TaskNotFoundError: If no task has this ID.
        """
