import json

from typing import Any

import httpx

from pydantic import ValidationError

from taskapi.client.errors import TaskClientHTTPError, TaskClientJSONError
from taskapi.types import Task, TaskCreate, TaskPatch, TaskReplace
from taskapi.utils.telemetry import SpanKind, trace_class


@trace_class(kind=SpanKind.CLIENT)
class TaskClient:
    """Client for the task REST API."""

    def __init__(
        self,
        httpx_client: httpx.AsyncClient,
        base_url: str,
        tasks_path: str = '/api/tasks',
    ):
        """Initializes the TaskClient.

        Args:
            httpx_client: An async HTTP client, e.g. `httpx.AsyncClient`.
            base_url: The base URL of the task server.
            tasks_path: The path of the task collection, relative to the
                base URL.
        """
        self.url = f'{base_url.rstrip("/")}/{tasks_path.strip("/")}'
        self.httpx_client = httpx_client

    async def _send_request(
        self,
        method: str,
        url: str,
        payload: dict[str, Any] | None = None,
        http_kwargs: dict[str, Any] | None = None,
    ) -> Any:
        """Sends a request to the server and decodes the JSON response.

        Args:
            method: The HTTP method.
            url: The full URL to call.
            payload: Optional JSON body.
            http_kwargs: Optional dictionary of keyword arguments to pass to
                the underlying httpx request.

        Returns:
            The decoded JSON response.

        Raises:
            TaskClientHTTPError: If the server answers with an error status
                or the request cannot be sent. The server's plain-text error
                body becomes the exception message.
            TaskClientJSONError: If the response body cannot be decoded as JSON.
        """
        try:
            response = await self.httpx_client.request(
                method, url, json=payload, **(http_kwargs or {})
            )
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            raise TaskClientHTTPError(
                e.response.status_code, e.response.text
            ) from e
        except json.JSONDecodeError as e:
            raise TaskClientJSONError(str(e)) from e
        except httpx.RequestError as e:
            raise TaskClientHTTPError(
                503, f'Network communication error: {e}'
            ) from e

    def _to_task(self, data: Any) -> Task:
        try:
            return Task.model_validate(data)
        except ValidationError as e:
            raise TaskClientJSONError(str(e)) from e

    async def list_tasks(
        self, *, http_kwargs: dict[str, Any] | None = None
    ) -> list[Task]:
        """Fetches every task, in the order the server lists them."""
        data = await self._send_request(
            'GET', self.url, http_kwargs=http_kwargs
        )
        if not isinstance(data, list):
            raise TaskClientJSONError('Expected a JSON array of tasks')
        return [self._to_task(item) for item in data]

    async def get_task(
        self, task_id: int, *, http_kwargs: dict[str, Any] | None = None
    ) -> Task:
        """Fetches a single task.

        Raises:
            TaskClientHTTPError: With status 404 if the task does not exist.
        """
        return self._to_task(
            await self._send_request(
                'GET', f'{self.url}/{task_id}', http_kwargs=http_kwargs
            )
        )

    async def create_task(
        self,
        params: TaskCreate,
        *,
        http_kwargs: dict[str, Any] | None = None,
    ) -> Task:
        """Creates a task and returns it with its assigned ID.

        Raises:
            TaskClientHTTPError: With status 400 if the name is rejected.
        """
        return self._to_task(
            await self._send_request(
                'POST',
                self.url,
                params.model_dump(mode='json', exclude_none=True),
                http_kwargs,
            )
        )

    async def replace_task(
        self,
        task_id: int,
        params: TaskReplace,
        *,
        http_kwargs: dict[str, Any] | None = None,
    ) -> Task:
        """Replaces every field of an existing task."""
        return self._to_task(
            await self._send_request(
                'PUT',
                f'{self.url}/{task_id}',
                params.model_dump(mode='json', exclude_none=True),
                http_kwargs,
            )
        )

    async def patch_task(
        self,
        task_id: int,
        params: TaskPatch,
        *,
        http_kwargs: dict[str, Any] | None = None,
    ) -> Task:
        """Updates only the fields set on `params`."""
        return self._to_task(
            await self._send_request(
                'PATCH',
                f'{self.url}/{task_id}',
                params.model_dump(mode='json', exclude_unset=True),
                http_kwargs,
            )
        )

    async def delete_task(
        self, task_id: int, *, http_kwargs: dict[str, Any] | None = None
    ) -> Task:
        """Deletes a task and returns the removed record."""
        return self._to_task(
            await self._send_request(
                'DELETE', f'{self.url}/{task_id}', http_kwargs=http_kwargs
            )
        )
