"""
Tasks API endpoints.

Provides CRUD operations for tasks. Every response uses the same
envelope: {success, data | message, error?}.
"""
from typing import Optional

from django.http import HttpRequest
from ninja import Body, Router

from apps.core.store import TaskStoreInterface
from . import services
from .decorators import handle_task_errors
from .schemas import TaskIn, TaskPatch, TaskEnvelope, TaskListEnvelope, ErrorEnvelope


def build_router(store: TaskStoreInterface) -> Router:
    """
    Build the tasks router bound to ``store``.

    The store is created once at startup and shared by every request.
    """
    router = Router(tags=["Tasks"])

    @router.get(
        "",
        response={200: TaskListEnvelope, 500: ErrorEnvelope},
        by_alias=True,
        exclude_none=True,
    )
    @handle_task_errors("Failed to fetch tasks")
    def list_tasks_api(request: HttpRequest):
        """List all tasks in store order."""
        tasks = services.list_tasks(store)
        return 200, {"success": True, "data": tasks, "total": len(tasks)}

    @router.get(
        "/{task_id}",
        response={200: TaskEnvelope, 400: ErrorEnvelope, 404: ErrorEnvelope, 500: ErrorEnvelope},
        by_alias=True,
        exclude_none=True,
    )
    @handle_task_errors("Failed to fetch task")
    def get_task_api(request: HttpRequest, task_id: str):
        """Get a single task by ID."""
        task = services.get_task(store, task_id)
        return 200, {"success": True, "data": task}

    @router.post(
        "",
        response={201: TaskEnvelope, 400: ErrorEnvelope, 500: ErrorEnvelope},
        by_alias=True,
        exclude_none=True,
    )
    @handle_task_errors("Failed to create task")
    def create_task_api(request: HttpRequest, payload: TaskIn):
        """
        Create a new task.

        description, startDate, endDate and status are all required.
        """
        task = services.create_task(store, payload)
        return 201, {"success": True, "message": "Task created successfully", "data": task}

    @router.put(
        "/{task_id}",
        response={200: TaskEnvelope, 400: ErrorEnvelope, 404: ErrorEnvelope, 500: ErrorEnvelope},
        by_alias=True,
        exclude_none=True,
    )
    @handle_task_errors("Failed to update task")
    def update_task_api(request: HttpRequest, task_id: str, payload: Optional[TaskPatch] = Body(None)):
        """
        Update an existing task.

        Only the fields present in the body are changed; a request without
        a body only refreshes updatedAt.
        """
        task = services.update_task(store, task_id, payload)
        return 200, {"success": True, "message": "Task updated successfully", "data": task}

    @router.delete(
        "/{task_id}",
        response={200: TaskEnvelope, 400: ErrorEnvelope, 404: ErrorEnvelope, 500: ErrorEnvelope},
        by_alias=True,
        exclude_none=True,
    )
    @handle_task_errors("Failed to delete task")
    def delete_task_api(request: HttpRequest, task_id: str):
        """Delete a task and return it."""
        task = services.delete_task(store, task_id)
        return 200, {"success": True, "message": "Task deleted successfully", "data": task}

    return router
