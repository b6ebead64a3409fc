"""Actions (alert, deny, none) assigned to evaluation rules."""

from __future__ import annotations

from akamai_appsec.services.eval_rules.models import (
    GetEvalRuleActionRequest,
    GetEvalRuleActionResponse,
    GetEvalRuleActionsRequest,
    GetEvalRuleActionsResponse,
    UpdateEvalRuleActionRequest,
    UpdateEvalRuleActionResponse,
)
from akamai_appsec.services.operation import call, filter_by_id, policy_path
from akamai_appsec.session.session import RequestContext, Session


def get_eval_rule_actions(
    session: Session,
    params: GetEvalRuleActionsRequest,
    ctx: RequestContext | None = None,
) -> GetEvalRuleActionsResponse:
    params.validate_request()
    result = call(
        session,
        GetEvalRuleActionsResponse,
        operation="GetEvalRuleActions",
        action="get eval rule actions",
        method="GET",
        path=f"{policy_path(params.config_id, params.version, params.policy_id)}/eval-rules",
        ctx=ctx,
    )
    if params.rule_id:
        result = GetEvalRuleActionsResponse(rule_actions=filter_by_id(result.rule_actions, params.rule_id))
    return result


def get_eval_rule_action(
    session: Session,
    params: GetEvalRuleActionRequest,
    ctx: RequestContext | None = None,
) -> GetEvalRuleActionResponse:
    params.validate_request()
    base = policy_path(params.config_id, params.version, params.policy_id)
    return call(
        session,
        GetEvalRuleActionResponse,
        operation="GetEvalRuleAction",
        action="get eval rule action",
        method="GET",
        path=f"{base}/eval-rules/{params.rule_id}",
        ctx=ctx,
    )


def update_eval_rule_action(
    session: Session,
    params: UpdateEvalRuleActionRequest,
    ctx: RequestContext | None = None,
) -> UpdateEvalRuleActionResponse:
    params.validate_request()
    base = policy_path(params.config_id, params.version, params.policy_id)
    return call(
        session,
        UpdateEvalRuleActionResponse,
        operation="UpdateEvalRuleAction",
        action="update eval rule action",
        method="PUT",
        path=f"{base}/eval-rules/{params.rule_id}",
        json_body=params.to_wire(),
        ctx=ctx,
    )
