from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


# PUBLIC_INTERFACE
class CreateTodoRequest(BaseModel):
    """
    Raw input for creating a Todo item.

    Fields are only type-checked here. Business validation (trimming, length
    bounds, allowed priorities) happens in the create command so that every
    field error can be reported together.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Buy groceries",
                "description": "Milk, eggs, bread",
                "priority": "High",
            }
        }
    )

    title: str = Field(default="", description="Short title for the todo item (1..100 chars after trimming)")
    description: Optional[str] = Field(default=None, description="Optional detailed description (max 500 chars)")
    priority: Optional[str] = Field(default=None, description="One of Low, Medium, High. Defaults to Medium")


# PUBLIC_INTERFACE
class TodoOut(BaseModel):
    """
    Flat projection of a Todo returned to API clients.

    Serialized with camelCase names. Optional timestamps are only present for
    the matching status; dump with exclude_none to omit the others.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": "todo-1738000000000-k3j9x0a",
                "title": "Buy groceries",
                "description": "Milk, eggs, bread",
                "priority": "High",
                "status": "Completed",
                "createdAt": "2025-01-25T10:15:30.123Z",
                "completedAt": "2025-01-26T09:00:00.000Z",
            }
        },
    )

    id: str = Field(..., description="Unique identifier of the todo item")
    title: str = Field(..., description="Short title for the todo item")
    description: Optional[str] = Field(default=None, description="Optional detailed description")
    priority: str = Field(..., description="Low, Medium or High")
    status: str = Field(..., description="Active, Completed or Archived")
    created_at: str = Field(..., description="Creation timestamp (ISO-8601, UTC)")
    completed_at: Optional[str] = Field(default=None, description="Completion timestamp, Completed only")
    archived_at: Optional[str] = Field(default=None, description="Archival timestamp, Archived only")
