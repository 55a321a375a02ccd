"""
ASGI config for the Taskboard API.

Serves under any ASGI server (Uvicorn, Daphne) and, through Mangum, as an
AWS Lambda handler behind API Gateway.
"""
import os

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings')

from django.core.asgi import get_asgi_application

# Initialize Django at import time so Lambda pays it once per container
application = get_asgi_application()


def get_lambda_handler():
    """
    Returns a Mangum-wrapped handler for AWS Lambda.

    Imported lazily so local development doesn't need mangum installed.
    """
    try:
        from mangum import Mangum
    except ImportError:
        raise ImportError(
            "Mangum is required for Lambda deployment. "
            "Install with: pip install 'taskboard-api[lambda]'"
        )
    return Mangum(application, lifespan="off")


_lambda_handler = None


def lambda_handler(event, context):
    """AWS Lambda entry point for HTTP requests."""
    global _lambda_handler
    if _lambda_handler is None:
        _lambda_handler = get_lambda_handler()
    return _lambda_handler(event, context)
