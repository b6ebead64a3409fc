"""HTTP session and per-call request context."""

from akamai_appsec.session.session import (
    DEFAULT_USER_AGENT,
    RequestContext,
    Session,
    close_response_body,
)

__all__ = ["DEFAULT_USER_AGENT", "RequestContext", "Session", "close_response_body"]
