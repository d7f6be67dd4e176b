import json
import logging

from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse, PlainTextResponse, Response
from starlette.routing import Route

from taskapi.server.request_handlers.request_handler import RequestHandler
from taskapi.types import Task, TaskCreate, TaskPatch, TaskReplace
from taskapi.utils.errors import (
    InvalidRequestBodyError,
    TaskAPIError,
    TaskValidationError,
)


logger = logging.getLogger(__name__)

PayloadT = TypeVar('PayloadT', bound=BaseModel)


class TaskStarletteApplication:
    """A Starlette application serving the task REST endpoints.

    Parses request bodies into payload models, dispatches them to the
    request handler by HTTP method and renders tasks as JSON. Errors raised
    by the handler are answered with their plain-text message.
    """

    def __init__(self, http_handler: RequestHandler):
        """Initializes the TaskStarletteApplication.

        Args:
            http_handler: The handler instance responsible for processing
              task requests via http.
        """
        self.handler = http_handler

    def _generate_error_response(
        self, request: Request, error: TaskAPIError
    ) -> PlainTextResponse:
        """Creates a plain-text Starlette response for a handler error.

        Args:
            request: The request that failed.
            error: The `TaskAPIError` raised while serving it.

        Returns:
            A `PlainTextResponse` carrying the error's message and status.
        """
        logger.warning(
            'Request Error (%s %s): Status=%s, Message=%r',
            request.method,
            request.url.path,
            error.status_code,
            error.message,
        )
        return PlainTextResponse(error.message, status_code=error.status_code)

    async def _parse_body(
        self, request: Request, model: type[PayloadT]
    ) -> PayloadT:
        """Reads the request body and validates it against `model`.

        An empty body is treated as an empty JSON object.

        Raises:
            InvalidRequestBodyError: If the body is not JSON, not an object,
                or holds a value that cannot be coerced.
            TaskValidationError: If the `name` field has the wrong type.
        """
        raw = await request.body()
        try:
            body = json.loads(raw) if raw.strip() else {}
        except json.JSONDecodeError as e:
            raise InvalidRequestBodyError() from e

        try:
            return model.model_validate(body)
        except ValidationError as e:
            error = e.errors()[0]
            field = error['loc'][0] if error['loc'] else None
            if field == 'name':
                raise TaskValidationError() from e
            if field is None:
                raise InvalidRequestBodyError(
                    'The request body must be a JSON object.'
                ) from e
            raise InvalidRequestBodyError(
                f"Invalid value for '{field}': {error['msg']}"
            ) from e

    def _task_response(
        self, task: Task, status_code: int = 200
    ) -> JSONResponse:
        return JSONResponse(
            task.model_dump(mode='json'), status_code=status_code
        )

    async def _handle_collection(self, request: Request) -> Response:
        """Handles `GET` and `POST` on the task collection."""
        try:
            if request.method == 'POST':
                params = await self._parse_body(request, TaskCreate)
                task = await self.handler.on_create_task(params)
                return self._task_response(task, status_code=201)

            tasks = await self.handler.on_list_tasks()
            return JSONResponse(
                [task.model_dump(mode='json') for task in tasks]
            )
        except TaskAPIError as e:
            return self._generate_error_response(request, e)
        except Exception as e:
            logger.error(f'Unhandled exception: {e}')
            raise

    async def _handle_item(self, request: Request) -> Response:
        """Handles `GET`, `PUT`, `PATCH` and `DELETE` on a single task.

        For `PUT` and `PATCH` the task is looked up before the body is
        parsed, so an unknown ID is a 404 whatever the body holds.
        """
        task_id: int = request.path_params['task_id']
        try:
            if request.method in ('PUT', 'PATCH'):
                await self.handler.on_get_task(task_id)
            match request.method:
                case 'PUT':
                    task = await self.handler.on_replace_task(
                        task_id, await self._parse_body(request, TaskReplace)
                    )
                case 'PATCH':
                    task = await self.handler.on_patch_task(
                        task_id, await self._parse_body(request, TaskPatch)
                    )
                case 'DELETE':
                    task = await self.handler.on_delete_task(task_id)
                case _:
                    task = await self.handler.on_get_task(task_id)
            return self._task_response(task)
        except TaskAPIError as e:
            return self._generate_error_response(request, e)
        except Exception as e:
            logger.error(f'Unhandled exception: {e}')
            raise

    def routes(self, base_url: str = '/api/tasks') -> list[Route]:
        """Returns the Starlette Routes for handling task requests.

        Args:
            base_url: The URL path of the task collection. Single tasks are
              served at `{base_url}/{task_id}`.

        Returns:
            A list of Starlette Route objects.
        """
        base_url = base_url.rstrip('/')
        return [
            Route(
                base_url,
                self._handle_collection,
                methods=['GET', 'POST'],
                name='tasks',
            ),
            Route(
                base_url + '/{task_id:int}',
                self._handle_item,
                methods=['GET', 'PUT', 'PATCH', 'DELETE'],
                name='task',
            ),
        ]

    def build(self, base_url: str = '/api/tasks', **kwargs: Any) -> Starlette:
        """Builds and returns the Starlette application instance.

        Args:
            base_url: The URL path of the task collection.
            **kwargs: Additional keyword arguments to pass to the Starlette
              constructor. Routes given under `routes` are kept alongside
              the task routes.

        Returns:
            A configured Starlette application instance.
        """
        app_routes = self.routes(base_url)
        if 'routes' in kwargs:
            kwargs['routes'] = [*kwargs['routes'], *app_routes]
        else:
            kwargs['routes'] = app_routes

        return Starlette(**kwargs)
