"""Pydantic schemas for list endpoints."""

from pydantic import BaseModel, ConfigDict, Field

from tasklist.infrastructure.persistence.models import ListModel


class ListCreate(BaseModel):
    """Request body for creating a list."""

    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(..., min_length=1, max_length=255)


class ListUpdate(BaseModel):
    """Request body for updating a list.

    Only the title can change; other fields in the body, including the
    owner, are ignored.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    title: str | None = Field(None, min_length=1, max_length=255)


class ListResponse(BaseModel):
    """A list as returned to clients."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id")
    title: str
    user_id: str = Field(..., alias="_userId")

    @classmethod
    def from_model(cls, task_list: ListModel) -> "ListResponse":
        return cls(id=task_list.id, title=task_list.title, user_id=task_list.user_id)
