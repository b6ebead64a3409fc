"""Translation of non-success API responses into ApiError."""

from __future__ import annotations

import json
from typing import Any

import httpx

from akamai_appsec.utils.exceptions import ApiError
from akamai_appsec.utils.logging_utils import get_logger


def error_from_response(response: httpx.Response, logger: Any = None) -> ApiError:
    """Build an ApiError from a response; the status code always comes from the response."""
    log = logger or get_logger()
    try:
        body = response.read()
    except httpx.HTTPError as e:
        log.error(f"reading error response body: {e}")
        return ApiError(
            title="Failed to read error body",
            detail=str(e),
            status_code=response.status_code,
        )

    try:
        data = json.loads(body) if body else {}
    except ValueError as e:
        log.error(f"could not unmarshal API error: {e}")
        data = None

    if not isinstance(data, dict):
        return ApiError(
            title="Failed to unmarshal error body. Application Security API failed. Check details for more information.",
            detail=body.decode("utf-8", errors="replace"),
            status_code=response.status_code,
        )

    return ApiError(
        type=str(data.get("type") or ""),
        title=str(data.get("title") or ""),
        detail=str(data.get("detail") or ""),
        instance=str(data.get("instance") or ""),
        status_code=response.status_code,
        errors=data.get("errors"),
    )
