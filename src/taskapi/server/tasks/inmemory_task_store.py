import asyncio
import logging

from taskapi.server.tasks.task_store import TaskStore
from taskapi.types import Task, TaskCreate, TaskPatch, TaskReplace
from taskapi.utils.errors import TaskNotFoundError
from taskapi.utils.task import new_task, validate_task_name


logger = logging.getLogger(__name__)


class InMemoryTaskStore(TaskStore):
    """In-memory implementation of TaskStore.

    Tasks are kept in a dict, which preserves insertion order for listing.
    IDs come from a counter that only moves forward, so an ID is never
    handed out twice even after the task holding it is deleted.
    """

    def __init__(self, tasks: list[Task] | None = None) -> None:
        """Initializes the InMemoryTaskStore.

        Args:
            tasks: Optional tasks to start with, e.g. the output of
                `seed_tasks()`. Their IDs must be unique.
        """
        logger.debug('Initializing InMemoryTaskStore')
        self.tasks: dict[int, Task] = {}
        self.last_id = 0
        self.lock = asyncio.Lock()
        for task in tasks or []:
            if task.id in self.tasks:
                raise ValueError(f'Duplicate task id: {task.id}')
            self.tasks[task.id] = task.model_copy()
            self.last_id = max(self.last_id, task.id)

    def _find(self, task_id: int) -> Task:
        task = self.tasks.get(task_id)
        if task is None:
            logger.debug('Task %s not found in store.', task_id)
            raise TaskNotFoundError()
        return task

    async def list_all(self) -> list[Task]:
        async with self.lock:
            return [task.model_copy() for task in self.tasks.values()]

    async def get(self, task_id: int) -> Task:
        async with self.lock:
            logger.debug('Attempting to get task with id: %s', task_id)
            return self._find(task_id).model_copy()

    async def create(self, params: TaskCreate) -> Task:
        async with self.lock:
            task = new_task(self.last_id + 1, params)
            self.last_id = task.id
            self.tasks[task.id] = task
            logger.info('Task %s created successfully.', task.id)
            return task.model_copy()

    async def replace(self, task_id: int, params: TaskReplace) -> Task:
        async with self.lock:
            task = self._find(task_id)
            task.name = validate_task_name(params.name)
            task.completed = params.completed
            logger.info('Task %s replaced successfully.', task_id)
            return task.model_copy()

    async def patch(self, task_id: int, params: TaskPatch) -> Task:
        async with self.lock:
            task = self._find(task_id)
            if 'name' in params.model_fields_set:
                task.name = validate_task_name(params.name)
            if params.completed is not None:
                task.completed = params.completed
            logger.info('Task %s patched successfully.', task_id)
            return task.model_copy()

    async def delete(self, task_id: int) -> Task:
        async with self.lock:
            logger.debug('Attempting to delete task with id: %s', task_id)
            task = self._find(task_id)
            del self.tasks[task_id]
            logger.info('Task %s deleted successfully.', task_id)
            return task
