"""
scrapco_admin.errors

Error taxonomy shared by the gate, services and API layer.

Responsibilities:
- Map each failure class to the HTTP status it surfaces as.
- Translate data-service rejections into `UpstreamError` at service boundaries.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_401_UNAUTHORIZED,
    HTTP_403_FORBIDDEN,
    HTTP_404_NOT_FOUND,
    HTTP_500_INTERNAL_SERVER_ERROR,
)

from scrapco_admin.data_service.client import DataServiceError


class AdminApiError(Exception):
    status_code: int = HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ConfigurationError(AdminApiError):
    """A required configuration value is missing or blank."""

    status_code = HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, name: str) -> None:
        super().__init__(f"Missing required env var: {name}")
        self.name = name


class AuthenticationError(AdminApiError):
    status_code = HTTP_401_UNAUTHORIZED


class AuthorizationError(AdminApiError):
    status_code = HTTP_403_FORBIDDEN


class ValidationError(AdminApiError):
    status_code = HTTP_400_BAD_REQUEST


class UpstreamError(AdminApiError):
    """The data service rejected a query; its message is passed through."""

    status_code = HTTP_400_BAD_REQUEST


class NotFoundError(AdminApiError):
    status_code = HTTP_404_NOT_FOUND


class UnexpectedError(AdminApiError):
    status_code = HTTP_500_INTERNAL_SERVER_ERROR


@contextmanager
def upstream_errors() -> Iterator[None]:
    try:
        yield
    except DataServiceError as e:
        raise UpstreamError(e.message) from e
