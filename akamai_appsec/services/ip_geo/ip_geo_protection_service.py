"""Network layer (IP/Geo) protection switch of a security policy."""

from __future__ import annotations

from akamai_appsec.services.ip_geo.models import (
    GetIPGeoProtectionRequest,
    GetIPGeoProtectionResponse,
    GetIPGeoProtectionsRequest,
    GetIPGeoProtectionsResponse,
    UpdateIPGeoProtectionRequest,
    UpdateIPGeoProtectionResponse,
)
from akamai_appsec.services.operation import call, policy_path
from akamai_appsec.session.session import RequestContext, Session


def _protections_path(config_id: int, version: int, policy_id: str) -> str:
    return f"{policy_path(config_id, version, policy_id)}/protections"


def get_ip_geo_protections(
    session: Session,
    params: GetIPGeoProtectionsRequest,
    ctx: RequestContext | None = None,
) -> GetIPGeoProtectionsResponse:
    params.validate_request()
    return call(
        session,
        GetIPGeoProtectionsResponse,
        operation="GetIPGeoProtections",
        action="get IPGeo protections",
        method="GET",
        path=_protections_path(params.config_id, params.version, params.policy_id),
        ctx=ctx,
    )


def get_ip_geo_protection(
    session: Session,
    params: GetIPGeoProtectionRequest,
    ctx: RequestContext | None = None,
) -> GetIPGeoProtectionResponse:
    params.validate_request()
    return call(
        session,
        GetIPGeoProtectionResponse,
        operation="GetIPGeoProtection",
        action="get IPGeo protection",
        method="GET",
        path=_protections_path(params.config_id, params.version, params.policy_id),
        ctx=ctx,
    )


def update_ip_geo_protection(
    session: Session,
    params: UpdateIPGeoProtectionRequest,
    ctx: RequestContext | None = None,
) -> UpdateIPGeoProtectionResponse:
    params.validate_request()
    return call(
        session,
        UpdateIPGeoProtectionResponse,
        operation="UpdateIPGeoProtection",
        action="update IPGeo protection",
        method="PUT",
        path=_protections_path(params.config_id, params.version, params.policy_id),
        json_body=params.to_wire(),
        ctx=ctx,
    )
