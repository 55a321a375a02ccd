"""API Schemas for Tasks app - request/response validation."""
from typing import Optional
from datetime import datetime
from ninja import Schema
from pydantic import Field, field_validator


def _reject_blank(value: Optional[str]) -> Optional[str]:
    if value is not None and not value.strip():
        raise ValueError("The title field must not be empty.")
    return value


# =============================================================================
# Request Schemas
# =============================================================================

class TaskIn(Schema):
    """Schema for creating a task."""
    title: str = Field(..., min_length=1, max_length=255)
    description: str = ""

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value):
        return _reject_blank(value)


class TaskUpdateIn(Schema):
    """Partial update: only fields present in the body are applied."""
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    completed: Optional[bool] = None

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value):
        return _reject_blank(value)


# =============================================================================
# Response Schemas
# =============================================================================

class TaskOut(Schema):
    id: int
    title: str
    description: str
    completed: bool
    owner_id: int
    created_at: datetime
    updated_at: datetime
