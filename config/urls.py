"""
URL configuration for the Tasks API project.

The document store is connected once, when this module is first loaded,
and handed to the API.
"""
from apps.core.store import get_store
from .api import build_api, build_urlpatterns

api = build_api(get_store())

urlpatterns = build_urlpatterns(api)
