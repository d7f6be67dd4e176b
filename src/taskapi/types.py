"""Pydantic models for tasks and the request bodies that modify them."""

from pydantic import BaseModel, ConfigDict


class Task(BaseModel):
    """A task record held by the store."""

    id: int
    """Sequential identifier, assigned by the store and never reused."""
    name: str
    """Human readable name, at least three characters long."""
    completed: bool = False
    """Whether the task has been completed."""


class TaskCreate(BaseModel):
    """Body of a POST request creating a new task."""

    model_config = ConfigDict(extra='ignore')

    name: str | None = None
    completed: bool = False


class TaskReplace(BaseModel):
    """Body of a PUT request replacing every field of a task.

    A missing `completed` resets the flag to `False`.
    """

    model_config = ConfigDict(extra='ignore')

    name: str | None = None
    completed: bool = False


class TaskPatch(BaseModel):
    """Body of a PATCH request; only fields that are set are applied."""

    model_config = ConfigDict(extra='ignore')

    name: str | None = None
    completed: bool | None = None
