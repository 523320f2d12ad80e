"""
NinjaAPI assembly for the Tasks API project.
"""
from django.http import HttpRequest
from django.urls import path
from ninja import NinjaAPI
from ninja.errors import HttpError, ValidationError

from apps.core.store import TaskStoreInterface
from apps.tasks.api import build_router
from apps.tasks.views import index, api_docs


def build_api(store: TaskStoreInterface, **kwargs) -> NinjaAPI:
    """
    Create the API with the tasks router bound to ``store``.

    Request parsing errors are reported with the same envelope as the
    task endpoints, as a 400 instead of ninja's default 422.
    """
    api = NinjaAPI(
        title="Tasks API",
        version="1.0.0",
        description="CRUD API for tasks stored in MongoDB",
        docs_url="/docs",
        **kwargs,
    )

    @api.exception_handler(ValidationError)
    def request_validation_error(request: HttpRequest, exc: ValidationError):
        return api.create_response(
            request,
            {"success": False, "message": "Invalid request body", "error": str(exc.errors)},
            status=400,
        )

    @api.exception_handler(HttpError)
    def http_error(request: HttpRequest, exc: HttpError):
        return api.create_response(
            request,
            {"success": False, "message": str(exc)},
            status=exc.status_code,
        )

    api.add_router("/tasks", build_router(store))
    return api


def build_urlpatterns(api: NinjaAPI) -> list:
    """Site layout: discovery payload at /, static description at /api-docs, API under /api/."""
    return [
        path('', index),
        path('api-docs', api_docs),
        path('api/', api.urls),
    ]
