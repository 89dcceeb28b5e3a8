"""
Request Validation

Shape rules (types, lengths, required fields) live on the Pydantic
schemas. The checks here cover what a single schema cannot see:
path ids and the path/body id agreement on updates.

Every check returns a list of FieldError. An empty list means valid.
The same FieldError shape is used to render FastAPI's own request
validation errors, so clients get one error format for every 400.
"""

from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel


class FieldError(BaseModel):
    """One rejected input field."""

    field: str
    message: str


def check_path_id(resource_id: int) -> list[FieldError]:
    """Path ids start at 1."""
    if resource_id < 1:
        return [FieldError(field="id", message="Id must be a positive integer")]
    return []


def check_update(resource_id: int, dto: Any) -> list[FieldError]:
    """
    Validate an update request before any store call.

    Rejects a non-positive path id, a missing body, and a body whose id
    differs from the path id.
    """
    errors = check_path_id(resource_id)
    if dto is None:
        errors.append(FieldError(field="body", message="Request body is required"))
        return errors
    if dto.id != resource_id:
        errors.append(
            FieldError(
                field="id",
                message=f"Body id {dto.id} does not match path id {resource_id}",
            )
        )
    return errors


def field_errors_from_pydantic(errors: Sequence[dict]) -> list[FieldError]:
    """
    Convert Pydantic error dicts into FieldErrors.

    The location prefix ("body", "path", "query") is dropped. A missing
    body, or one that is not valid JSON (FastAPI reports the character
    offset as the location), is reported as field "body".
    """
    result = []
    for error in errors:
        if error.get("type") == "json_invalid":
            result.append(FieldError(field="body", message=error.get("msg", "Invalid JSON")))
            continue
        loc = [str(part) for part in error.get("loc", ())]
        if loc and loc[0] in ("body", "path", "query", "header"):
            loc = loc[1:] or loc[:1]
        result.append(
            FieldError(
                field=".".join(loc) or "body",
                message=error.get("msg", "Invalid value"),
            )
        )
    return result
