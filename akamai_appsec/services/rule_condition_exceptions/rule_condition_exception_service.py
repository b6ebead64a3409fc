"""Condition exceptions attached to security policy rules."""

from __future__ import annotations

from akamai_appsec.services.conditions import RemoveConditionExceptionBody
from akamai_appsec.services.operation import call, policy_path
from akamai_appsec.services.rule_condition_exceptions.models import (
    GetRuleConditionExceptionRequest,
    GetRuleConditionExceptionResponse,
    GetRuleConditionExceptionsRequest,
    GetRuleConditionExceptionsResponse,
    RemoveRuleConditionExceptionRequest,
    RemoveRuleConditionExceptionResponse,
    UpdateRuleConditionExceptionRequest,
    UpdateRuleConditionExceptionResponse,
)
from akamai_appsec.session.session import RequestContext, Session


def _rules_path(config_id: int, version: int, policy_id: str) -> str:
    return f"{policy_path(config_id, version, policy_id)}/rules"


def get_rule_condition_exceptions(
    session: Session,
    params: GetRuleConditionExceptionsRequest,
    ctx: RequestContext | None = None,
) -> GetRuleConditionExceptionsResponse:
    params.validate_request()
    return call(
        session,
        GetRuleConditionExceptionsResponse,
        operation="GetRuleConditionExceptions",
        action="get rule condition exceptions",
        method="GET",
        path=_rules_path(params.config_id, params.version, params.policy_id),
        ctx=ctx,
    )


def get_rule_condition_exception(
    session: Session,
    params: GetRuleConditionExceptionRequest,
    ctx: RequestContext | None = None,
) -> GetRuleConditionExceptionResponse:
    params.validate_request()
    rules = _rules_path(params.config_id, params.version, params.policy_id)
    return call(
        session,
        GetRuleConditionExceptionResponse,
        operation="GetRuleConditionException",
        action="get rule condition exception",
        method="GET",
        path=f"{rules}/{params.rule_id}/condition-exception",
        ctx=ctx,
    )


def update_rule_condition_exception(
    session: Session,
    params: UpdateRuleConditionExceptionRequest,
    ctx: RequestContext | None = None,
) -> UpdateRuleConditionExceptionResponse:
    """Replace the rule's condition exception; the raw payload goes out unchanged."""
    params.validate_request()
    rules = _rules_path(params.config_id, params.version, params.policy_id)
    return call(
        session,
        UpdateRuleConditionExceptionResponse,
        operation="UpdateRuleConditionException",
        action="update rule condition exception",
        method="PUT",
        path=f"{rules}/{params.rule_id}/condition-exception",
        raw_body=params.json_payload_raw,
        ctx=ctx,
    )


def remove_rule_condition_exception(
    session: Session,
    params: RemoveRuleConditionExceptionRequest,
    ctx: RequestContext | None = None,
) -> RemoveRuleConditionExceptionResponse:
    params.validate_request()
    rules = _rules_path(params.config_id, params.version, params.policy_id)
    return call(
        session,
        RemoveRuleConditionExceptionResponse,
        operation="RemoveRuleConditionException",
        action="remove rule condition exception",
        method="PUT",
        path=f"{rules}/{params.rule_id}/condition-exception",
        json_body=RemoveConditionExceptionBody().to_wire(),
        ctx=ctx,
    )
