import logging

from typing import Any

from starlette.applications import Starlette

from taskapi.server.apps import TaskStarletteApplication
from taskapi.server.request_handlers import DefaultRequestHandler
from taskapi.server.tasks import InMemoryTaskStore, TaskStore
from taskapi.utils.task import seed_tasks


logger = logging.getLogger(__name__)


class TaskServer:
    """Task server that runs a Starlette application."""

    def __init__(self, task_store: TaskStore | None = None, seed: bool = True):
        """Initializes the TaskServer.

        Args:
            task_store: The store to serve. When omitted a new
                `InMemoryTaskStore` is created.
            seed: Whether a newly created store starts with the seed tasks.
                Ignored when `task_store` is given.
        """
        if task_store is None:
            task_store = InMemoryTaskStore(seed_tasks() if seed else None)
        self.task_store = task_store
        self.request_handler = DefaultRequestHandler(task_store=task_store)

    def app(self, **kwargs: Any) -> Starlette:
        """Builds and returns the Starlette application instance."""
        logger.info('Building task application instance')
        return TaskStarletteApplication(
            http_handler=self.request_handler
        ).build(**kwargs)

    def start(self, **kwargs: Any):
        """Starts the server using Uvicorn."""
        logger.info('Starting task server')
        import uvicorn

        uvicorn.run(self.app(), **kwargs)
