"""Components for storing tasks within the task server."""

from taskapi.server.tasks.inmemory_task_store import InMemoryTaskStore
from taskapi.server.tasks.task_store import TaskStore


__all__ = [
    'InMemoryTaskStore',
    'TaskStore',
]
