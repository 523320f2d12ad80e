import logging
from functools import wraps
from typing import Callable

from django.http import HttpRequest

from apps.core.store import StoreFailure
from .services import TaskNotFound, TaskValidationError

logger = logging.getLogger(__name__)


def handle_task_errors(failure_message: str):
    """
    Decorator mapping task service errors onto the error envelope.

    Usage:
        @router.get("/{task_id}", response={200: TaskEnvelope, 400: ErrorEnvelope, ...})
        @handle_task_errors("Failed to fetch task")
        def get_task_api(request, task_id: str):
            ...

    - TaskValidationError -> 400 with the validation message
    - TaskNotFound -> 404
    - StoreFailure -> 500 with ``failure_message`` and the driver error
    """
    def decorator(view_func: Callable):
        @wraps(view_func)
        def wrapper(request: HttpRequest, *args, **kwargs):
            try:
                return view_func(request, *args, **kwargs)
            except TaskValidationError as e:
                return 400, {"success": False, "message": str(e)}
            except TaskNotFound as e:
                return 404, {"success": False, "message": str(e)}
            except StoreFailure as e:
                logger.error(f"{failure_message}: {e}")
                return 500, {"success": False, "message": failure_message, "error": str(e)}
        return wrapper
    return decorator
