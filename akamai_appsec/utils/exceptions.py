"""
Exception hierarchy for akamai_appsec.

Provides:
- A base error carrying a code, a category and structured details
- Client-side validation errors aggregated per field
- Request construction and transport failures
- Structured API errors translated from non-success responses
"""

from __future__ import annotations

import json
from enum import Enum
from typing import Any


class ErrorCategory(Enum):
    """Where a failure was detected."""
    VALIDATION = "validation"
    REQUEST = "request"
    TRANSPORT = "transport"
    API = "api"


class AppSecError(Exception):
    """Base exception for all akamai_appsec errors."""

    def __init__(
        self,
        message: str,
        code: str = "APPSEC_ERROR",
        category: ErrorCategory = ErrorCategory.TRANSPORT,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.code,
            "message": self.message,
            "category": self.category.value,
            "details": self.details,
        }

    def __str__(self) -> str:
        return self.message


class ValidationError(AppSecError):
    """One or more required identifying fields are missing.

    ``errors`` maps each failing field name to its rule message. The message text lists
    every violation so callers see all of them at once.
    """

    def __init__(self, errors: dict[str, str]):
        self.errors = dict(sorted(errors.items()))
        joined = "; ".join(f"{field}: {msg}" for field, msg in self.errors.items())
        super().__init__(
            f"struct validation: {joined}.",
            code="VALIDATION_ERROR",
            category=ErrorCategory.VALIDATION,
            details={"fields": list(self.errors)},
        )


class RequestBuildError(AppSecError):
    """The HTTP request could not be constructed."""

    def __init__(self, message: str):
        super().__init__(message, code="REQUEST_BUILD_ERROR", category=ErrorCategory.REQUEST)


class TransportError(AppSecError):
    """The HTTP call failed before a usable response came back."""

    def __init__(self, message: str):
        super().__init__(message, code="TRANSPORT_ERROR", category=ErrorCategory.TRANSPORT)


class ResponseDecodeError(AppSecError):
    """A success response body could not be decoded into the response model."""

    def __init__(self, message: str):
        super().__init__(message, code="RESPONSE_DECODE_ERROR", category=ErrorCategory.TRANSPORT)


class ApiError(AppSecError):
    """Structured problem returned by the API for a non-success status code."""

    def __init__(
        self,
        *,
        type: str = "",
        title: str = "",
        detail: str = "",
        instance: str = "",
        status_code: int = 0,
        errors: Any = None,
    ):
        self.type = type
        self.title = title
        self.detail = detail
        self.instance = instance
        self.status_code = status_code
        self.errors = errors
        super().__init__(
            f"API error: \n{json.dumps(self.problem(), indent=2)}",
            code="API_ERROR",
            category=ErrorCategory.API,
            details=self.problem(),
        )

    def problem(self) -> dict[str, Any]:
        data: dict[str, Any] = {"type": self.type, "title": self.title, "detail": self.detail}
        if self.instance:
            data["instance"] = self.instance
        if self.status_code:
            data["statusCode"] = self.status_code
        if self.errors is not None:
            data["errors"] = self.errors
        return data

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ApiError):
            return NotImplemented
        return (
            self.type == other.type
            and self.title == other.title
            and self.detail == other.detail
            and self.status_code == other.status_code
        )

    def __hash__(self) -> int:
        return hash((self.type, self.title, self.detail, self.status_code))
