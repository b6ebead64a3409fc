"""Python client for the Akamai Application Security API."""

__version__ = "0.1.0"

from akamai_appsec.client import AppSec, new_client  # noqa: E402
from akamai_appsec.config.schema import ClientConfig  # noqa: E402
from akamai_appsec.session.session import RequestContext, Session  # noqa: E402
from akamai_appsec.utils.exceptions import (  # noqa: E402
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
    "AppSec",
    "AppSecError",
    "ClientConfig",
    "ErrorCategory",
    "RequestBuildError",
    "RequestContext",
    "ResponseDecodeError",
    "Session",
    "TransportError",
    "ValidationError",
    "__version__",
    "new_client",
]
