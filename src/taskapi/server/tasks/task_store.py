from abc import ABC, abstractmethod

from taskapi.types import Task, TaskCreate, TaskPatch, TaskReplace


class TaskStore(ABC):
    """Task Store interface.

    Defines the methods for listing, creating, modifying and removing
    `Task` objects. Lookups of unknown ids raise `TaskNotFoundError`;
    invalid names raise `TaskValidationError`. A failing call leaves the
    store unchanged.
    """

    @abstractmethod
    async def list_all(self) -> list[Task]:
        """Returns every task in insertion order."""

    @abstractmethod
    async def get(self, task_id: int) -> Task:
        """Retrieves a task from the store by ID."""

    @abstractmethod
    async def create(self, params: TaskCreate) -> Task:
        """Adds a task under the next free ID and returns it."""

    @abstractmethod
    async def replace(self, task_id: int, params: TaskReplace) -> Task:
        """Overwrites every field of an existing task."""

    @abstractmethod
    async def patch(self, task_id: int, params: TaskPatch) -> Task:
        """Updates only the fields set on `params`."""

    @abstractmethod
    async def delete(self, task_id: int) -> Task:
        """Removes a task from the store by ID and returns it."""
