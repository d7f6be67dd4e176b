"""HTTP application components for the task server."""

from taskapi.server.apps.starlette_app import TaskStarletteApplication


__all__ = ['TaskStarletteApplication']
