"""API Schemas for Tasks app - Pydantic/Ninja schemas for request/response validation."""
from typing import List, Optional

from ninja import Schema
from pydantic import ConfigDict
from pydantic.alias_generators import to_camel


class CamelSchema(Schema):
    """Schema exposed with camelCase keys on the wire (startDate, createdAt...)."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# =============================================================================
# Request Schemas
# =============================================================================

class TaskIn(CamelSchema):
    """
    Schema for creating a task.

    Fields are optional at the schema level so that missing values are
    reported through the standard error envelope rather than a 422.
    """
    description: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    status: Optional[str] = None


class TaskPatch(CamelSchema):
    """
    Schema for a partial update.

    Only fields present in the request body are applied; use
    ``dict(exclude_unset=True)`` to tell an absent field from an explicit value.
    """
    description: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    status: Optional[str] = None


# =============================================================================
# Response Schemas
# =============================================================================

class TaskOut(CamelSchema):
    id: str
    description: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    status: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None  # Absent until the first update


class TaskEnvelope(Schema):
    success: bool = True
    message: Optional[str] = None
    data: TaskOut


class TaskListEnvelope(Schema):
    success: bool = True
    data: List[TaskOut]
    total: int


class ErrorEnvelope(Schema):
    success: bool = False
    message: str
    error: Optional[str] = None
