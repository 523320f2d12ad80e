"""
ASGI config for the Tasks API project.

Serves traditional ASGI servers (Uvicorn, Daphne) and AWS Lambda via Mangum.
"""
import os

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings')

# =============================================================================
# Cold Start Optimization
# =============================================================================
# Django is initialized at module load time (container startup), so the
# document store connection is opened before the first request arrives.

from django.core.asgi import get_asgi_application

application = get_asgi_application()


# =============================================================================
# Lambda Handler (via Mangum)
# =============================================================================

_mangum_handler = None


def lambda_handler(event, context):
    """
    AWS Lambda entry point for API Gateway events.

    Mangum is built on the first invocation and reused by warm containers.
    """
    global _mangum_handler
    if _mangum_handler is None:
        from mangum import Mangum
        _mangum_handler = Mangum(application, lifespan="off")
    return _mangum_handler(event, context)
