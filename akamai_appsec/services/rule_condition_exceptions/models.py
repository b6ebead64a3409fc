"""Rule condition exception models for a security policy's attack-group rules."""

from __future__ import annotations

from typing import ClassVar

from pydantic import Field

from akamai_appsec.services.conditions import RawJSON, RuleConditionException
from akamai_appsec.services.operation import AppSecRequest


class GetRuleConditionExceptionsRequest(AppSecRequest):
    config_id: int = Field(0, exclude=True)
    version: int = Field(0, exclude=True)
    policy_id: str = Field("", exclude=True)
    rule_id: int = Field(0, exclude=True)

    required_fields: ClassVar[tuple[str, ...]] = ("config_id", "version", "policy_id")


class GetRuleConditionExceptionsResponse(RuleConditionException):
    pass


class GetRuleConditionExceptionRequest(AppSecRequest):
    config_id: int = Field(0, exclude=True)
    version: int = Field(0, exclude=True)
    policy_id: str = Field("", exclude=True)
    rule_id: int = Field(0, exclude=True)

    required_fields: ClassVar[tuple[str, ...]] = ("config_id", "version", "policy_id", "rule_id")


class GetRuleConditionExceptionResponse(RuleConditionException):
    pass


class UpdateRuleConditionExceptionRequest(AppSecRequest):
    config_id: int = Field(0, exclude=True)
    version: int = Field(0, exclude=True)
    policy_id: str = Field("", exclude=True)
    rule_id: int = Field(0, exclude=True)
    json_payload_raw: RawJSON = Field(b"", exclude=True)

    required_fields: ClassVar[tuple[str, ...]] = ("config_id", "version", "policy_id", "rule_id")


class UpdateRuleConditionExceptionResponse(RuleConditionException):
    pass


class RemoveRuleConditionExceptionRequest(AppSecRequest):
    config_id: int = Field(0, exclude=True)
    version: int = Field(0, exclude=True)
    policy_id: str = Field("", exclude=True)
    rule_id: int = Field(0, exclude=True)

    required_fields: ClassVar[tuple[str, ...]] = ("config_id", "version", "policy_id", "rule_id")


class RemoveRuleConditionExceptionResponse(RuleConditionException):
    pass
