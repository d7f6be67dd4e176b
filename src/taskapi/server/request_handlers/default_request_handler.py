import logging

from taskapi.server.request_handlers.request_handler import RequestHandler
from taskapi.server.tasks import TaskStore
from taskapi.types import Task, TaskCreate, TaskPatch, TaskReplace
from taskapi.utils.telemetry import SpanKind, trace_class


logger = logging.getLogger(__name__)


@trace_class(kind=SpanKind.SERVER)
class DefaultRequestHandler(RequestHandler):
    """Default request handler for all incoming requests.

    Forwards each route to the `TaskStore` it owns. Store errors propagate
    unchanged so the application can turn them into HTTP responses.
    """

    def __init__(self, task_store: TaskStore) -> None:
        """Initializes the DefaultRequestHandler.

        Args:
            task_store: The `TaskStore` instance holding the tasks.
        """
        self.task_store = task_store

    async def on_list_tasks(self) -> list[Task]:
        return await self.task_store.list_all()

    async def on_get_task(self, task_id: int) -> Task:
        return await self.task_store.get(task_id)

    async def on_create_task(self, params: TaskCreate) -> Task:
        task = await self.task_store.create(params)
        logger.debug('Created task %s: %s', task.id, task.name)
        return task

    async def on_replace_task(self, task_id: int, params: TaskReplace) -> Task:
        return await self.task_store.replace(task_id, params)

    async def on_patch_task(self, task_id: int, params: TaskPatch) -> Task:
        return await self.task_store.patch(task_id, params)

    async def on_delete_task(self, task_id: int) -> Task:
        return await self.task_store.delete(task_id)
