"""Hostname coverage: which hostnames are protected, overlapping configs, covering targets."""

from __future__ import annotations

from akamai_appsec.services.hostname_coverage.models import (
    GetApiHostnameCoverageMatchTargetsRequest,
    GetApiHostnameCoverageMatchTargetsResponse,
    GetApiHostnameCoverageOverlappingRequest,
    GetApiHostnameCoverageOverlappingResponse,
    GetApiHostnameCoverageRequest,
    GetApiHostnameCoverageResponse,
)
from akamai_appsec.services.operation import APPSEC_ROOT, call, config_path
from akamai_appsec.session.session import RequestContext, Session


def get_api_hostname_coverage(
    session: Session,
    params: GetApiHostnameCoverageRequest,
    ctx: RequestContext | None = None,
) -> GetApiHostnameCoverageResponse:
    """List every hostname on the account with its protection status."""
    params.validate_request()
    return call(
        session,
        GetApiHostnameCoverageResponse,
        operation="GetApiHostnameCoverage",
        action="get hostname coverage",
        method="GET",
        path=f"{APPSEC_ROOT}/hostname-coverage",
        ctx=ctx,
    )


def get_api_hostname_coverage_overlapping(
    session: Session,
    params: GetApiHostnameCoverageOverlappingRequest,
    ctx: RequestContext | None = None,
) -> GetApiHostnameCoverageOverlappingResponse:
    """List other configurations that also cover ``params.hostname``."""
    params.validate_request()
    return call(
        session,
        GetApiHostnameCoverageOverlappingResponse,
        operation="GetApiHostnameCoverageOverlapping",
        action="get hostname coverage overlapping",
        method="GET",
        path=f"{config_path(params.config_id, params.version)}/hostname-coverage/overlapping",
        params={"hostname": params.hostname},
        ctx=ctx,
    )


def get_api_hostname_coverage_match_targets(
    session: Session,
    params: GetApiHostnameCoverageMatchTargetsRequest,
    ctx: RequestContext | None = None,
) -> GetApiHostnameCoverageMatchTargetsResponse:
    """List the match targets that cover ``params.hostname`` in one config version."""
    params.validate_request()
    return call(
        session,
        GetApiHostnameCoverageMatchTargetsResponse,
        operation="GetApiHostnameCoverageMatchTargets",
        action="get hostname coverage match targets",
        method="GET",
        path=f"{config_path(params.config_id, params.version)}/hostname-coverage/match-targets",
        params={"hostname": params.hostname},
        ctx=ctx,
    )
