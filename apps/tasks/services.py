"""
Task services - validation, merge-patch building and timestamps.

Every function takes the store as its first argument so the API layer
can inject whichever backend was built at startup.
"""
import logging
from datetime import datetime
from typing import List, Optional

from bson import ObjectId
from django.utils import timezone

from apps.core.store import Document, TaskStoreInterface
from .schemas import TaskIn, TaskPatch

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ('description', 'startDate', 'endDate', 'status')


class TaskValidationError(ValueError):
    """Missing required field or malformed identifier. Never reaches the store."""


class TaskNotFound(LookupError):
    """The store call succeeded but matched no document."""


def iso_timestamp(value: Optional[datetime] = None) -> str:
    """UTC time as ISO-8601 with milliseconds, e.g. 2024-11-18T18:50:14.314Z. Defaults to now."""
    value = value or timezone.now()
    return value.isoformat(timespec='milliseconds').replace('+00:00', 'Z')


def validate_task_id(task_id: str) -> str:
    if not ObjectId.is_valid(task_id):
        raise TaskValidationError("Invalid task ID")
    return task_id


def list_tasks(store: TaskStoreInterface) -> List[Document]:
    return store.find_all()


def get_task(store: TaskStoreInterface, task_id: str) -> Document:
    validate_task_id(task_id)
    task = store.find_by_id(task_id)
    if task is None:
        raise TaskNotFound("Task not found")
    return task


def create_task(store: TaskStoreInterface, payload: TaskIn) -> Document:
    """
    Create a task from a complete payload.

    All four fields must be present and non-empty; the store assigns the
    identifier and the returned document is built locally from what was
    inserted.
    """
    data = payload.dict(by_alias=True)
    if not all(data.get(field) for field in REQUIRED_FIELDS):
        raise TaskValidationError(
            f"All fields are required: {', '.join(REQUIRED_FIELDS)}"
        )

    doc = {field: data[field] for field in REQUIRED_FIELDS}
    doc['createdAt'] = iso_timestamp()

    task_id = store.create(doc)
    logger.info(f"Created task {task_id}")
    return {'id': task_id, **doc}


def build_patch(payload: Optional[TaskPatch]) -> Document:
    """
    Merge-patch holding only the fields the caller sent, plus updatedAt.

    Fields that are sent must be non-empty, as on create.
    """
    patch = payload.dict(by_alias=True, exclude_unset=True) if payload is not None else {}
    blank = [field for field in REQUIRED_FIELDS if field in patch and not patch[field]]
    if blank:
        raise TaskValidationError(f"Fields cannot be empty: {', '.join(blank)}")
    patch['updatedAt'] = iso_timestamp()
    return patch


def update_task(store: TaskStoreInterface, task_id: str, payload: Optional[TaskPatch] = None) -> Document:
    validate_task_id(task_id)
    patch = build_patch(payload)

    task = store.update_by_id(task_id, patch)
    if task is None:
        raise TaskNotFound("Task not found")

    logger.info(f"Updated task {task_id}: {sorted(patch)}")
    return task


def delete_task(store: TaskStoreInterface, task_id: str) -> Document:
    validate_task_id(task_id)
    task = store.delete_by_id(task_id)
    if task is None:
        raise TaskNotFound("Task not found")

    logger.info(f"Deleted task {task_id}")
    return task
