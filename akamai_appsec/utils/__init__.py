"""Shared helpers for akamai_appsec."""

from akamai_appsec.utils.exceptions import (
    ApiError,
    AppSecError,
    ErrorCategory,
    RequestBuildError,
    ResponseDecodeError,
    TransportError,
    ValidationError,
)

__all__ = [
    "ApiError",
    "AppSecError",
    "ErrorCategory",
    "RequestBuildError",
    "ResponseDecodeError",
    "TransportError",
    "ValidationError",
]
