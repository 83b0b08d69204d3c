# /app/core/exceptions.py

"""
Domain error taxonomy for the records service.

Services raise these instead of HTTP errors so they stay usable outside a
request. A single exception handler registered in `app.main` turns any
`RecordsError` into a JSON response carrying the subclass's status code.
"""

from fastapi import status


class RecordsError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class ValidationFailure(RecordsError):
    """A field is malformed or names an unrecognized enumerated value."""
    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY


class RecordNotFoundError(RecordsError):
    """The targeted or referenced record does not exist."""
    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(RecordsError):
    """A uniqueness constraint would be violated."""
    status_code = status.HTTP_409_CONFLICT


class ForbiddenError(RecordsError):
    """The caller's roles do not grant the operation's capability."""
    status_code = status.HTTP_403_FORBIDDEN


class UnauthorizedError(RecordsError):
    """The caller's identity could not be resolved to a record it may act as."""
    status_code = status.HTTP_401_UNAUTHORIZED
