"""Plain Django views for the site root and the static API description."""
from django.http import HttpRequest, JsonResponse
from django.views.decorators.http import require_GET

from .docs import OPENAPI_DOC, discovery_payload


@require_GET
def index(request: HttpRequest):
    return JsonResponse(discovery_payload())


@require_GET
def api_docs(request: HttpRequest):
    return JsonResponse(OPENAPI_DOC)
