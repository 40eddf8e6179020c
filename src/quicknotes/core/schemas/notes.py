"""
Note management schemas.

These schemas define the wire contracts for note CRUD operations. Field
rules (required title, length limits) are enforced by the note service so
that every rejection carries one of its fixed messages; the schemas only
check types.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class NoteCreate(BaseModel):
    """Note creation request schema."""

    title: Optional[str] = Field(default=None, description="Note title, 1-80 chars once trimmed")
    body: Optional[str] = Field(default=None, description="Note body, up to 500 chars")

    model_config = ConfigDict(
        json_schema_extra={"example": {"title": "Shop", "body": "milk"}}
    )


class NoteUpdate(BaseModel):
    """Note update request schema.

    Only fields present in the request are applied; use ``model_fields_set``
    to tell an omitted field from one sent explicitly.
    """

    title: Optional[str] = Field(default=None, description="New title")
    body: Optional[str] = Field(default=None, description="New body")

    model_config = ConfigDict(
        json_schema_extra={"example": {"body": "milk,eggs"}}
    )


class NoteResponse(BaseModel):
    """Note response schema. ``updatedAt`` is left out until the first update."""

    id: str = Field(description="Note unique identifier")
    user_id: str = Field(description="Owner user id")
    title: str = Field(description="Note title")
    body: str = Field(description="Note body")
    created_at: datetime = Field(description="Creation timestamp")
    updated_at: Optional[datetime] = Field(default=None, description="Last update timestamp")

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": "note_123e4567-e89b-12d3-a456-426614174000",
                "userId": "alice",
                "title": "Shop",
                "body": "milk,eggs",
                "createdAt": "2025-09-13T10:30:00Z",
                "updatedAt": "2025-09-13T11:00:00Z",
            }
        },
    )
