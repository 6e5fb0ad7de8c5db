"""Pydantic schemas for task endpoints."""

from pydantic import BaseModel, ConfigDict, Field

from tasklist.infrastructure.persistence.models import TaskModel


class TaskCreate(BaseModel):
    """Request body for creating a task."""

    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(..., min_length=1, max_length=255)


class TaskUpdate(BaseModel):
    """Request body for updating a task. The owning list cannot change."""

    model_config = ConfigDict(str_strip_whitespace=True)

    title: str | None = Field(None, min_length=1, max_length=255)
    completed: bool | None = None


class TaskResponse(BaseModel):
    """A task as returned to clients."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id")
    title: str
    list_id: str = Field(..., alias="_listId")
    completed: bool

    @classmethod
    def from_model(cls, task: TaskModel) -> "TaskResponse":
        return cls(
            id=task.id,
            title=task.title,
            list_id=task.list_id,
            completed=task.completed,
        )


class MessageResponse(BaseModel):
    """Plain acknowledgement message."""

    message: str
