"""Condition exceptions attached to evaluation rules."""

from __future__ import annotations

from akamai_appsec.services.conditions import RemoveConditionExceptionBody
from akamai_appsec.services.eval_rules.models import (
    GetEvalRuleConditionExceptionRequest,
    GetEvalRuleConditionExceptionResponse,
    GetEvalRuleConditionExceptionsRequest,
    GetEvalRuleConditionExceptionsResponse,
    RemoveEvalRuleConditionExceptionRequest,
    RemoveEvalRuleConditionExceptionResponse,
    UpdateEvalRuleConditionExceptionRequest,
    UpdateEvalRuleConditionExceptionResponse,
)
from akamai_appsec.services.operation import call, policy_path
from akamai_appsec.session.session import RequestContext, Session


def _condition_exception_path(config_id: int, version: int, policy_id: str, rule_id: int) -> str:
    return f"{policy_path(config_id, version, policy_id)}/eval-rules/{rule_id}/condition-exception"


def get_eval_rule_condition_exceptions(
    session: Session,
    params: GetEvalRuleConditionExceptionsRequest,
    ctx: RequestContext | None = None,
) -> GetEvalRuleConditionExceptionsResponse:
    params.validate_request()
    return call(
        session,
        GetEvalRuleConditionExceptionsResponse,
        operation="GetEvalRuleConditionExceptions",
        action="get eval rule condition exceptions",
        method="GET",
        path=f"{policy_path(params.config_id, params.version, params.policy_id)}/eval-rules",
        ctx=ctx,
    )


def get_eval_rule_condition_exception(
    session: Session,
    params: GetEvalRuleConditionExceptionRequest,
    ctx: RequestContext | None = None,
) -> GetEvalRuleConditionExceptionResponse:
    params.validate_request()
    return call(
        session,
        GetEvalRuleConditionExceptionResponse,
        operation="GetEvalRuleConditionException",
        action="get eval rule condition exception",
        method="GET",
        path=_condition_exception_path(params.config_id, params.version, params.policy_id, params.rule_id),
        ctx=ctx,
    )


def update_eval_rule_condition_exception(
    session: Session,
    params: UpdateEvalRuleConditionExceptionRequest,
    ctx: RequestContext | None = None,
) -> UpdateEvalRuleConditionExceptionResponse:
    """Replace the condition exception with ``params.json_payload_raw``, sent as is."""
    params.validate_request()
    return call(
        session,
        UpdateEvalRuleConditionExceptionResponse,
        operation="UpdateEvalRuleConditionException",
        action="update eval rule condition exception",
        method="PUT",
        path=_condition_exception_path(params.config_id, params.version, params.policy_id, params.rule_id),
        raw_body=params.json_payload_raw,
        ctx=ctx,
    )


def remove_eval_rule_condition_exception(
    session: Session,
    params: RemoveEvalRuleConditionExceptionRequest,
    ctx: RequestContext | None = None,
) -> RemoveEvalRuleConditionExceptionResponse:
    params.validate_request()
    return call(
        session,
        RemoveEvalRuleConditionExceptionResponse,
        operation="RemoveEvalRuleConditionException",
        action="remove eval rule condition exception",
        method="PUT",
        path=_condition_exception_path(params.config_id, params.version, params.policy_id, params.rule_id),
        json_body=RemoveConditionExceptionBody().to_wire(),
        ctx=ctx,
    )
