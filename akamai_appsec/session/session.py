"""HTTP session shared by every Application Security operation.

The session owns the ``httpx.Client``, the default headers and the logger. Operations
build a request with :meth:`Session.new_request`, hand it to :meth:`Session.exec` and
read back the raw response plus the decoded model.
"""

from __future__ import annotations

import platform
from dataclasses import dataclass, field
from typing import Any, Collection, TypeVar

import httpx
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from akamai_appsec import __version__
from akamai_appsec.config.schema import ClientConfig
from akamai_appsec.utils.exceptions import ResponseDecodeError
from akamai_appsec.utils.logging_utils import get_logger

T = TypeVar("T", bound=BaseModel)

DEFAULT_USER_AGENT = f"akamai-appsec-python/{__version__} python/{platform.python_version()}"


@dataclass(frozen=True)
class RequestContext:
    """Per-call options: extra headers, a logger override and a timeout override."""
    headers: dict[str, str] = field(default_factory=dict)
    logger: Any = None
    timeout: float | None = None


class Session:
    def __init__(
        self,
        base_url: str,
        *,
        client: httpx.Client | None = None,
        auth: httpx.Auth | None = None,
        user_agent: str = "",
        timeout: float = 30.0,
        account_switch_key: str = "",
        headers: dict[str, str] | None = None,
        trace: bool = False,
        log: Any = None,
    ):
        if not base_url or not base_url.strip():
            raise ValueError("base_url should not be empty")
        self.base_url = base_url.strip().rstrip("/")
        self.user_agent = user_agent or DEFAULT_USER_AGENT
        self.account_switch_key = account_switch_key
        self.headers = dict(headers or {})
        self.trace = trace
        self._auth = auth
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=timeout)
        self._log = log or get_logger()

    @classmethod
    def from_config(cls, config: ClientConfig, **kwargs: Any) -> "Session":
        """Build a session from a ClientConfig; keyword arguments override it."""
        options: dict[str, Any] = {
            "user_agent": config.user_agent,
            "timeout": config.timeout_seconds,
            "account_switch_key": config.account_switch_key,
            "headers": config.headers,
            "trace": config.trace,
        }
        options.update(kwargs)
        return cls(config.normalized_base_url, **options)

    @property
    def client(self) -> httpx.Client:
        return self._client

    def log(self, ctx: RequestContext | None = None) -> Any:
        """Return the context logger, or the session logger."""
        if ctx is not None and ctx.logger is not None:
            return ctx.logger
        return self._log

    def new_request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json_body: Any = None,
        raw_body: bytes | None = None,
        ctx: RequestContext | None = None,
    ) -> httpx.Request:
        """Build a request for ``path`` relative to the base URL.

        ``raw_body`` is sent byte for byte; ``json_body`` is JSON encoded. Only one of them
        should be given.
        """
        query = dict(params or {})
        if self.account_switch_key:
            query["accountSwitchKey"] = self.account_switch_key

        headers = {"User-Agent": self.user_agent, "Accept": "application/json"}
        headers.update(self.headers)
        if ctx is not None:
            headers.update(ctx.headers)

        kwargs: dict[str, Any] = {}
        if raw_body is not None:
            kwargs["content"] = raw_body
            headers["Content-Type"] = "application/json"
        elif json_body is not None:
            kwargs["json"] = json_body
            headers["Content-Type"] = "application/json"
        if ctx is not None and ctx.timeout is not None:
            kwargs["timeout"] = ctx.timeout

        return self._client.build_request(
            method,
            f"{self.base_url}{path}",
            params=query or None,
            headers=headers,
            **kwargs,
        )

    def exec(
        self,
        request: httpx.Request,
        out: type[T] | None = None,
        accepted: Collection[int] | None = None,
    ) -> tuple[httpx.Response, T | None]:
        """
        Send the request and decode the body into ``out``.

        Only statuses in ``accepted`` are decoded (any 2xx when omitted). Returns the raw
        response and the decoded model (None when ``out`` is None or the status is not
        decoded). Transport failures surface as ``httpx.HTTPError``; a
        success body that does not fit ``out`` raises ResponseDecodeError.
        """
        logger = self._log
        if self.trace:
            logger.debug(f"--> {request.method} {request.url}")
            logger.debug(f"    headers: {dict(request.headers)}")
            if request.content:
                logger.debug(f"    body: {request.content.decode('utf-8', errors='replace')}")

        if self._auth is not None:
            response = self._client.send(request, auth=self._auth)
        else:
            response = self._client.send(request)

        if self.trace:
            logger.debug(f"<-- {response.status_code} {request.method} {request.url}")
            logger.debug(f"    body: {response.text}")

        decodable = response.status_code in accepted if accepted is not None else response.is_success
        if out is None or not decodable:
            return response, None
        if response.status_code == 204 or not response.content:
            return response, out()
        try:
            return response, out.model_validate_json(response.content)
        except PydanticValidationError as e:
            raise ResponseDecodeError(f"unable to decode response body into {out.__name__}: {e}") from e

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "Session":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def close_response_body(response: httpx.Response) -> None:
    """Close the response; safe to call more than once."""
    response.close()
