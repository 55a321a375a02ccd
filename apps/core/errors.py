"""
JSON error rendering shared by every router.

All failures leave the API in one of three shapes:
- {"error": "..."} for HttpError, not-found and unexpected failures
- {"message": "...", "errors": {field: [...]}} for 422 validation failures
"""
import logging
from collections import defaultdict

from django.http import HttpRequest
from ninja import NinjaAPI
from ninja.errors import HttpError, ValidationError

logger = logging.getLogger(__name__)

VALIDATION_MESSAGE = "The given data was invalid."

# Parameter locations ninja prefixes onto pydantic error locs
_LOCATION_PARTS = {"body", "query", "path", "header", "cookie", "form", "file", "payload"}


class NotFoundError(Exception):
    """A looked-up row does not exist. Rendered as 404."""

    default_message = "Not found"

    def __init__(self, message: str = None):
        super().__init__(message or self.default_message)


def validation_errors_by_field(errors: list) -> dict:
    """
    Group pydantic error dicts by field name.

    The field is the last string element of the error location that isn't a
    parameter-location marker, e.g. ('body', 'payload', 'title') -> 'title'.
    """
    grouped = defaultdict(list)
    for error in errors:
        loc = [part for part in error.get("loc", ()) if isinstance(part, str)]
        fields = [part for part in loc if part not in _LOCATION_PARTS]
        field = fields[-1] if fields else (loc[-1] if loc else "non_field_errors")
        grouped[field].append(error.get("msg", "Invalid value"))
    return dict(grouped)


def register_exception_handlers(api: NinjaAPI) -> None:
    """Attach the project's error renderers to a NinjaAPI instance."""

    @api.exception_handler(ValidationError)
    def on_validation_error(request: HttpRequest, exc: ValidationError):
        return api.create_response(
            request,
            {"message": VALIDATION_MESSAGE, "errors": validation_errors_by_field(exc.errors)},
            status=422,
        )

    @api.exception_handler(HttpError)
    def on_http_error(request: HttpRequest, exc: HttpError):
        return api.create_response(request, {"error": str(exc)}, status=exc.status_code)

    @api.exception_handler(NotFoundError)
    def on_not_found(request: HttpRequest, exc: NotFoundError):
        return api.create_response(request, {"error": str(exc)}, status=404)

    @api.exception_handler(Exception)
    def on_unexpected_error(request: HttpRequest, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.path}")
        return api.create_response(request, {"error": "Internal server error"}, status=500)
