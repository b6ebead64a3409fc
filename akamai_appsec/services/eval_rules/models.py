"""Evaluation rule models: rule action plus condition exception, for a security policy in evaluation mode."""

from __future__ import annotations

from typing import ClassVar

from pydantic import Field

from akamai_appsec.services.conditions import RawJSON, RuleConditionException
from akamai_appsec.services.operation import AppSecModel, AppSecRequest

POLICY_FIELDS = ("config_id", "version", "policy_id")
RULE_FIELDS = ("config_id", "version", "policy_id", "rule_id")


class EvalRule(AppSecModel):
    """Action and condition exception of a single evaluation rule."""
    action: str = ""
    condition_exception: RuleConditionException | None = None

    def is_empty_condition_exception(self) -> bool:
        return self.condition_exception is None or self.condition_exception.is_empty()


class EvalRuleEntry(EvalRule):
    id: int = 0


class RuleAction(AppSecModel):
    action: str = ""
    id: int = 0


# -- eval rules ---------------------------------------------------------------

class GetEvalRulesRequest(AppSecRequest):
    config_id: int = Field(0, exclude=True)
    version: int = Field(0, exclude=True)
    policy_id: str = Field("", exclude=True)
    rule_id: int = Field(0, exclude=True)

    required_fields: ClassVar[tuple[str, ...]] = POLICY_FIELDS


class GetEvalRulesResponse(AppSecModel):
    rules: list[EvalRuleEntry] = Field(default_factory=list, alias="evalRuleActions")


class GetEvalRuleRequest(AppSecRequest):
    config_id: int = Field(0, exclude=True)
    version: int = Field(0, exclude=True)
    policy_id: str = Field("", exclude=True)
    rule_id: int = Field(0, exclude=True)

    required_fields: ClassVar[tuple[str, ...]] = RULE_FIELDS


class GetEvalRuleResponse(EvalRule):
    pass


class UpdateEvalRuleRequest(AppSecRequest):
    """``json_payload_raw`` is the condition exception; it must parse and is sent byte for byte.

    An empty payload leaves ``conditionException`` out of the request body.
    """
    config_id: int = Field(0, exclude=True)
    version: int = Field(0, exclude=True)
    policy_id: str = Field("", exclude=True)
    rule_id: int = Field(0, exclude=True)
    action: str = ""
    json_payload_raw: RawJSON = Field(b"", exclude=True)

    required_fields: ClassVar[tuple[str, ...]] = RULE_FIELDS


class UpdateEvalRuleResponse(EvalRule):
    pass


# -- eval rule actions ----------------------------------------------------------

class GetEvalRuleActionsRequest(AppSecRequest):
    config_id: int = Field(0, exclude=True)
    version: int = Field(0, exclude=True)
    policy_id: str = Field("", exclude=True)
    rule_id: int = Field(0, exclude=True)

    required_fields: ClassVar[tuple[str, ...]] = POLICY_FIELDS


class GetEvalRuleActionsResponse(AppSecModel):
    rule_actions: list[RuleAction] = Field(default_factory=list, alias="evalRuleActions")


class GetEvalRuleActionRequest(AppSecRequest):
    config_id: int = Field(0, exclude=True)
    version: int = Field(0, exclude=True)
    policy_id: str = Field("", exclude=True)
    rule_id: int = Field(0, exclude=True)

    required_fields: ClassVar[tuple[str, ...]] = RULE_FIELDS


class GetEvalRuleActionResponse(AppSecModel):
    action: str = ""


class UpdateEvalRuleActionRequest(AppSecRequest):
    config_id: int = Field(0, exclude=True)
    version: int = Field(0, exclude=True)
    policy_id: str = Field("", exclude=True)
    rule_id: int = Field(0, exclude=True)
    action: str = ""

    required_fields: ClassVar[tuple[str, ...]] = RULE_FIELDS


class UpdateEvalRuleActionResponse(AppSecModel):
    action: str = ""


# -- eval rule condition exceptions ---------------------------------------------------

class GetEvalRuleConditionExceptionsRequest(AppSecRequest):
    config_id: int = Field(0, exclude=True)
    version: int = Field(0, exclude=True)
    policy_id: str = Field("", exclude=True)
    rule_id: int = Field(0, exclude=True)

    required_fields: ClassVar[tuple[str, ...]] = POLICY_FIELDS


class GetEvalRuleConditionExceptionsResponse(RuleConditionException):
    pass


class GetEvalRuleConditionExceptionRequest(AppSecRequest):
    config_id: int = Field(0, exclude=True)
    version: int = Field(0, exclude=True)
    policy_id: str = Field("", exclude=True)
    rule_id: int = Field(0, exclude=True)

    required_fields: ClassVar[tuple[str, ...]] = RULE_FIELDS


class GetEvalRuleConditionExceptionResponse(RuleConditionException):
    pass


class UpdateEvalRuleConditionExceptionRequest(AppSecRequest):
    config_id: int = Field(0, exclude=True)
    version: int = Field(0, exclude=True)
    policy_id: str = Field("", exclude=True)
    rule_id: int = Field(0, exclude=True)
    json_payload_raw: RawJSON = Field(b"", exclude=True)

    required_fields: ClassVar[tuple[str, ...]] = RULE_FIELDS


class UpdateEvalRuleConditionExceptionResponse(RuleConditionException):
    pass


class RemoveEvalRuleConditionExceptionRequest(AppSecRequest):
    config_id: int = Field(0, exclude=True)
    version: int = Field(0, exclude=True)
    policy_id: str = Field("", exclude=True)
    rule_id: int = Field(0, exclude=True)

    required_fields: ClassVar[tuple[str, ...]] = RULE_FIELDS


class RemoveEvalRuleConditionExceptionResponse(RuleConditionException):
    pass
