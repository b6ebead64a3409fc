"""Evaluation rules with their condition exceptions."""

from __future__ import annotations

import json
from typing import Any

from akamai_appsec.services.eval_rules.models import (
    GetEvalRuleRequest,
    GetEvalRuleResponse,
    GetEvalRulesRequest,
    GetEvalRulesResponse,
    UpdateEvalRuleRequest,
    UpdateEvalRuleResponse,
)
from akamai_appsec.services.operation import call, filter_by_id, policy_path
from akamai_appsec.session.session import RequestContext, Session
from akamai_appsec.utils.exceptions import RequestBuildError

INCLUDE_CONDITION_EXCEPTION = {"includeConditionException": "true"}


def _eval_rules_path(params: Any) -> str:
    return f"{policy_path(params.config_id, params.version, params.policy_id)}/eval-rules"


def get_eval_rules(
    session: Session,
    params: GetEvalRulesRequest,
    ctx: RequestContext | None = None,
) -> GetEvalRulesResponse:
    """List eval rules of a policy; narrowed to ``params.rule_id`` when set."""
    params.validate_request()
    result = call(
        session,
        GetEvalRulesResponse,
        operation="GetEvalRules",
        action="get eval rules",
        method="GET",
        path=_eval_rules_path(params),
        params=INCLUDE_CONDITION_EXCEPTION,
        ctx=ctx,
    )
    if params.rule_id:
        result = GetEvalRulesResponse(rules=filter_by_id(result.rules, params.rule_id))
    return result


def get_eval_rule(
    session: Session,
    params: GetEvalRuleRequest,
    ctx: RequestContext | None = None,
) -> GetEvalRuleResponse:
    params.validate_request()
    return call(
        session,
        GetEvalRuleResponse,
        operation="GetEvalRule",
        action="get eval rule",
        method="GET",
        path=f"{_eval_rules_path(params)}/{params.rule_id}",
        params=INCLUDE_CONDITION_EXCEPTION,
        ctx=ctx,
    )


def update_eval_rule(
    session: Session,
    params: UpdateEvalRuleRequest,
    ctx: RequestContext | None = None,
) -> UpdateEvalRuleResponse:
    """Set the action and condition exception of an eval rule in one call.

    The condition exception bytes are spliced into the body unchanged; they only have to parse.
    """
    params.validate_request()
    raw = params.json_payload_raw
    body = b'{"action":' + json.dumps(params.action).encode("utf-8")
    if raw:
        try:
            json.loads(raw)
        except ValueError as e:
            raise RequestBuildError(f"failed to create UpdateEvalRule request: {e}") from e
        body += b',"conditionException":' + raw
    body += b"}"
    return call(
        session,
        UpdateEvalRuleResponse,
        operation="UpdateEvalRule",
        action="update eval rule",
        method="PUT",
        path=f"{_eval_rules_path(params)}/{params.rule_id}/action-condition-exception",
        raw_body=body,
        ctx=ctx,
    )
