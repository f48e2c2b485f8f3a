"""
Centralized exception handling utilities for consistent error responses.
"""
from typing import Dict, Iterable, Optional

from fastapi import HTTPException, status


class APIException(HTTPException):
    """Base API exception with consistent error formatting."""

    def __init__(self, status_code: int, detail, headers: Optional[dict] = None):
        super().__init__(status_code=status_code, detail=detail, headers=headers)


class NotFoundError(APIException):
    """Resource not found exception."""

    def __init__(self, resource: str = "Resource", resource_id: Optional[int] = None):
        if resource_id is not None:
            detail = f"{resource} {resource_id} not found"
        else:
            detail = f"{resource} not found"
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class ValidationFailure(APIException):
    """Client data violates one or more field constraints.

    ``errors`` maps each offending field to its reason and is returned as the
    response body.
    """

    def __init__(self, errors: Dict[str, str]):
        self.errors = dict(errors)
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=self.errors)

    @classmethod
    def from_errors(cls, errors: Iterable[dict]) -> "ValidationFailure":
        """Build from pydantic/FastAPI error dicts, keeping every violation."""
        collected: Dict[str, list] = {}
        for error in errors:
            field = _field_name(error.get("loc", ()))
            collected.setdefault(field, []).append(_error_message(error))
        return cls({field: "; ".join(messages) for field, messages in collected.items()})


class IntegrityFailure(APIException):
    """Storage-layer failure (connectivity, constraint violation)."""

    def __init__(self, message: str = "Internal storage error"):
        super().__init__(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=message)


def _field_name(loc) -> str:
    # ("body", "price") -> "price", ("query", "minStock") -> "minStock"
    parts = [str(part) for part in loc if part not in ("body", "query", "path")]
    if not parts:
        return str(loc[0]) if loc else "request"
    return ".".join(parts)


def _error_message(error: dict) -> str:
    if error.get("type") == "value_error":
        cause = (error.get("ctx") or {}).get("error")
        if cause is not None:
            return str(cause)
    return error.get("msg", "Invalid value")
