"""
Error taxonomy for the task list API.

Each error carries the HTTP status it is reported with. Services raise these;
the NinjaAPI exception handlers in `apps.core.handlers` turn them into
plain-text responses.
"""


class TaskListError(Exception):
    """Base class for errors reported to API clients."""
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return self.message


class InvalidId(TaskListError):
    """A task id path segment is not a base-10 integer."""
    status_code = 400


class MissingClaim(TaskListError):
    """The verified token does not carry the configured email claim."""
    status_code = 400


class QueryFailed(TaskListError):
    """A statement failed to execute against the store."""
    status_code = 400


class NotFound(QueryFailed):
    """A scoped statement matched no row; reported like any query failure."""


class StoreUnavailable(TaskListError):
    """The store could not be reached."""
    status_code = 503
