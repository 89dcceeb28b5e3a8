"""
Result → HTTP Translation

Catalog services return Result objects. unwrap() is the only place
where an ErrorKind becomes a status code:

    VALIDATION  → 400, body carries the field errors
    NOT_FOUND   → 404
    PERSISTENCE → 500, fixed message, no internal detail
"""

from fastapi import HTTPException, status

from bookstore.services.catalog import ErrorKind, Result
from bookstore.validation import FieldError

INTERNAL_ERROR_MESSAGE = "Something went wrong. Please contact the administrator"


class ValidationFailed(HTTPException):
    """400 carrying a list of FieldError; rendered by the app's handler."""

    def __init__(self, errors: list[FieldError], message: str = "Invalid request") -> None:
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=message)
        self.errors = errors


def unwrap(result: Result):
    """Return the result's value or raise the matching HTTPException."""
    if result.is_ok:
        return result.value

    if result.error is ErrorKind.VALIDATION:
        raise ValidationFailed(result.field_errors, result.message)
    if result.error is ErrorKind.NOT_FOUND:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=result.message,
        )
    if result.error is ErrorKind.PERSISTENCE:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=INTERNAL_ERROR_MESSAGE,
        )

    raise ValueError(f"Unhandled error kind: {result.error!r}")
