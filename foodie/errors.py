from __future__ import annotations

from typing import Any


class FoodieError(Exception):
    """Base class for failures that map onto an error response envelope."""

    status_code = 500

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.errors = errors


class ValidationError(FoodieError):
    status_code = 400


class AuthenticationError(FoodieError):
    status_code = 401


class PermissionDeniedError(FoodieError):
    status_code = 403


class NotFoundError(FoodieError):
    status_code = 404


class ConflictError(FoodieError):
    status_code = 409
