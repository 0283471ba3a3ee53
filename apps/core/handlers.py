"""
NinjaAPI exception handlers.

Error responses carry the raw error message as plain text rather than a JSON
envelope, the format existing clients of the service already parse.
"""
import logging

from django.http import HttpRequest, HttpResponse
from ninja import NinjaAPI
from ninja.errors import HttpError, ValidationError

from .exceptions import TaskListError

logger = logging.getLogger(__name__)


def plain_text_error(message: str, status: int) -> HttpResponse:
    response = HttpResponse(message, status=status, content_type='text/plain; charset=utf-8')
    response['X-Content-Type-Options'] = 'nosniff'
    return response


def format_validation_errors(errors: list) -> str:
    """Flatten pydantic error dicts into one line per field."""
    parts = []
    for error in errors:
        # Drop the leading "body"/"path" marker from the location
        loc = [str(item) for item in error.get('loc', ())[1:]]
        label = '.'.join(loc) if loc else 'request'
        parts.append(f"{label}: {error.get('msg', 'invalid value')}")
    return '; '.join(parts) or 'invalid request'


def register_exception_handlers(api: NinjaAPI) -> None:
    @api.exception_handler(TaskListError)
    def task_list_error(request: HttpRequest, exc: TaskListError):
        logger.info(f"{request.method} {request.path} -> {exc.status_code}: {exc}")
        return plain_text_error(str(exc), exc.status_code)

    @api.exception_handler(ValidationError)
    def validation_error(request: HttpRequest, exc: ValidationError):
        return plain_text_error(format_validation_errors(exc.errors), 400)

    @api.exception_handler(HttpError)
    def http_error(request: HttpRequest, exc: HttpError):
        return plain_text_error(str(exc), exc.status_code)
