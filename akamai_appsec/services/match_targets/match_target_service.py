"""Match targets of a configuration version."""

from __future__ import annotations

from akamai_appsec.services.match_targets.models import (
    GetMatchTargetRequest,
    GetMatchTargetResponse,
    GetMatchTargetsRequest,
    GetMatchTargetsResponse,
    MatchTargets,
)
from akamai_appsec.services.operation import call, config_path, filter_by_id
from akamai_appsec.session.session import RequestContext, Session


def get_match_targets(
    session: Session,
    params: GetMatchTargetsRequest,
    ctx: RequestContext | None = None,
) -> GetMatchTargetsResponse:
    """List website and API match targets; narrowed to ``params.target_id`` when set."""
    params.validate_request()
    result = call(
        session,
        GetMatchTargetsResponse,
        operation="GetMatchTargets",
        action="get match targets",
        method="GET",
        path=f"{config_path(params.config_id, params.version)}/match-targets",
        ctx=ctx,
    )
    if not params.target_id:
        return result
    targets = result.match_targets
    return GetMatchTargetsResponse(
        match_targets=MatchTargets(
            website_targets=filter_by_id(targets.website_targets, params.target_id, "target_id"),
            api_targets=filter_by_id(targets.api_targets, params.target_id, "target_id"),
        )
    )


def get_match_target(
    session: Session,
    params: GetMatchTargetRequest,
    ctx: RequestContext | None = None,
) -> GetMatchTargetResponse:
    params.validate_request()
    return call(
        session,
        GetMatchTargetResponse,
        operation="GetMatchTarget",
        action="get match target",
        method="GET",
        path=f"{config_path(params.config_id, params.version)}/match-targets/{params.target_id}",
        ctx=ctx,
    )
