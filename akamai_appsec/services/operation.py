"""Request/response plumbing shared by every Application Security operation.

Each operation follows the same steps: validate the identifying fields, build the request,
execute it, check the status code and (for some list endpoints) filter the decoded
collection client side.
"""

from __future__ import annotations

from typing import Any, ClassVar, Sequence, TypeVar

import httpx
from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel

from akamai_appsec.services.errors import error_from_response
from akamai_appsec.session.session import RequestContext, Session, close_response_body
from akamai_appsec.utils.exceptions import RequestBuildError, ResponseDecodeError, TransportError
from akamai_appsec.utils.validation import validate_required

T = TypeVar("T", bound=BaseModel)
I = TypeVar("I")

GET_SUCCESS = frozenset({200})
PUT_SUCCESS = frozenset({200, 201})

APPSEC_ROOT = "/appsec/v1"


class AppSecModel(BaseModel):
    """Wire model: snake_case attributes, camelCase JSON.

    A JSON null decodes to the field default, the same as an absent member.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class AppSecRequest(AppSecModel):
    """Immutable request. Identifying fields are declared ``Field(exclude=True)`` so
    they only ever reach the URL."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True, extra="forbid")

    required_fields: ClassVar[tuple[str, ...]] = ()

    def validate_request(self) -> None:
        validate_required({name: getattr(self, name) for name in self.required_fields})


def config_path(config_id: int, version: int) -> str:
    return f"{APPSEC_ROOT}/configs/{config_id}/versions/{version}"


def policy_path(config_id: int, version: int, policy_id: str) -> str:
    return f"{config_path(config_id, version)}/security-policies/{policy_id}"


def call(
    session: Session,
    out: type[T],
    *,
    operation: str,
    action: str,
    method: str,
    path: str,
    params: dict[str, Any] | None = None,
    json_body: Any = None,
    raw_body: bytes | None = None,
    ctx: RequestContext | None = None,
) -> T:
    """Run one request and return the decoded model.

    ``operation`` names the call in logs and request-build errors; ``action`` prefixes
    transport errors ("get IPGeo request failed: ..."). GET accepts 200 only, every other
    method accepts 200 or 201. Any other status raises the translated ApiError as is.
    """
    logger = session.log(ctx)
    logger.debug(operation)
    accepted = GET_SUCCESS if method.upper() == "GET" else PUT_SUCCESS

    try:
        request = session.new_request(
            method,
            path,
            params=params,
            json_body=json_body,
            raw_body=raw_body,
            ctx=ctx,
        )
    except (httpx.InvalidURL, TypeError, ValueError) as e:
        raise RequestBuildError(f"failed to create {operation} request: {e}") from e

    try:
        response, result = session.exec(request, out, accepted=accepted)
    except (httpx.HTTPError, ResponseDecodeError) as e:
        raise TransportError(f"{action} request failed: {e}") from e

    try:
        if response.status_code not in accepted:
            raise error_from_response(response, logger)
    finally:
        close_response_body(response)

    if result is None:
        result = out()
    return result


def filter_by_id(items: Sequence[I], wanted: int, attr: str = "id") -> list[I]:
    """Keep items whose ``attr`` equals ``wanted``; zero keeps everything."""
    if not wanted:
        return list(items)
    return [item for item in items if getattr(item, attr, None) == wanted]
