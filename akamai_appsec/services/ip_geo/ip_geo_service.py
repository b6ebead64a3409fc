"""IP/Geo firewall settings of a security policy."""

from __future__ import annotations

from akamai_appsec.services.ip_geo.models import GetIPGeoRequest, GetIPGeoResponse, UpdateIPGeoRequest, UpdateIPGeoResponse
from akamai_appsec.services.operation import call, policy_path
from akamai_appsec.session.session import RequestContext, Session


def get_ip_geo(
    session: Session,
    params: GetIPGeoRequest,
    ctx: RequestContext | None = None,
) -> GetIPGeoResponse:
    """Return which network lists the policy's IP/Geo firewall uses."""
    params.validate_request()
    return call(
        session,
        GetIPGeoResponse,
        operation="GetIPGeo",
        action="get IPGeo",
        method="GET",
        path=f"{policy_path(params.config_id, params.version, params.policy_id)}/ip-geo-firewall",
        ctx=ctx,
    )


def update_ip_geo(
    session: Session,
    params: UpdateIPGeoRequest,
    ctx: RequestContext | None = None,
) -> UpdateIPGeoResponse:
    """Set the blocking mode and network lists. Controls left as None are not sent."""
    params.validate_request()
    return call(
        session,
        UpdateIPGeoResponse,
        operation="UpdateIPGeo",
        action="update IPGeo",
        method="PUT",
        path=f"{policy_path(params.config_id, params.version, params.policy_id)}/ip-geo-firewall",
        json_body=params.to_wire(),
        ctx=ctx,
    )
