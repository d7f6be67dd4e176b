from unittest.mock import AsyncMock

import pytest

from taskapi.server.request_handlers import DefaultRequestHandler
from taskapi.server.tasks import TaskStore
from taskapi.types import Task, TaskCreate, TaskPatch, TaskReplace
from taskapi.utils.errors import TaskNotFoundError


@pytest.fixture
def mock_task_store() -> AsyncMock:
    return AsyncMock(spec=TaskStore)


@pytest.fixture
def handler(mock_task_store: AsyncMock) -> DefaultRequestHandler:
    return DefaultRequestHandler(task_store=mock_task_store)


@pytest.mark.asyncio
async def test_on_list_tasks(handler, mock_task_store):
    tasks = [Task(id=1, name='Task 1')]
    mock_task_store.list_all.return_value = tasks
    assert await handler.on_list_tasks() == tasks


@pytest.mark.asyncio
async def test_on_get_task(handler, mock_task_store):
    mock_task_store.get.return_value = Task(id=1, name='Task 1')
    task = await handler.on_get_task(1)
    assert task.id == 1
    mock_task_store.get.assert_awaited_once_with(1)


@pytest.mark.asyncio
async def test_on_get_task_not_found_propagates(handler, mock_task_store):
    mock_task_store.get.side_effect = TaskNotFoundError()
    with pytest.raises(TaskNotFoundError):
        await handler.on_get_task(100)


@pytest.mark.asyncio
async def test_on_create_task(handler, mock_task_store):
    params = TaskCreate(name='Task 4')
    mock_task_store.create.return_value = Task(id=4, name='Task 4')
    task = await handler.on_create_task(params)
    assert task.id == 4
    mock_task_store.create.assert_awaited_once_with(params)


@pytest.mark.asyncio
async def test_on_replace_task(handler, mock_task_store):
    params = TaskReplace(name='New Task 1', completed=True)
    mock_task_store.replace.return_value = Task(
        id=1, name='New Task 1', completed=True
    )
    await handler.on_replace_task(1, params)
    mock_task_store.replace.assert_awaited_once_with(1, params)


@pytest.mark.asyncio
async def test_on_patch_task(handler, mock_task_store):
    params = TaskPatch(completed=True)
    mock_task_store.patch.return_value = Task(
        id=2, name='Task 2', completed=True
    )
    await handler.on_patch_task(2, params)
    mock_task_store.patch.assert_awaited_once_with(2, params)


@pytest.mark.asyncio
async def test_on_delete_task(handler, mock_task_store):
    mock_task_store.delete.return_value = Task(id=3, name='Task 3')
    task = await handler.on_delete_task(3)
    assert task.id == 3
    mock_task_store.delete.assert_awaited_once_with(3)
