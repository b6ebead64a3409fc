"""Condition/exception shapes shared by rule and eval-rule operations.

Write operations take the condition exception as an opaque JSON document (``RawJSON``)
that is sent exactly as given; it is never checked against these models. The models
below only describe what the API returns.
"""

from __future__ import annotations

import json
from typing import Annotated, Any

from pydantic import BeforeValidator, Field

from akamai_appsec.services.operation import AppSecModel


def _to_raw_json(value: Any) -> bytes:
    if value is None:
        return b""
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    if isinstance(value, str):
        return value.encode("utf-8")
    # Already-parsed documents are serialized once, compactly.
    return json.dumps(value, separators=(",", ":")).encode("utf-8")


RawJSON = Annotated[bytes, BeforeValidator(_to_raw_json)]


class RuleCondition(AppSecModel):
    type: str = ""
    extensions: list[str] = Field(default_factory=list)
    positive_match: bool = False
    filenames: list[str] = Field(default_factory=list)
    hosts: list[str] = Field(default_factory=list)
    ips: list[str] = Field(default_factory=list)
    use_headers: bool = False
    case_sensitive: bool = False
    name: str = ""
    name_case: bool = False
    value: str = ""
    wildcard: bool = False
    header: str = ""
    value_case: bool = False
    value_wildcard: bool = False
    methods: list[str] = Field(default_factory=list)
    paths: list[str] = Field(default_factory=list)
    client_lists: list[str] = Field(default_factory=list)


class SpecificHeaderCookieOrParamNames(AppSecModel):
    names: list[str] = Field(default_factory=list)
    selector: str = ""


class SpecificHeaderCookieOrParamPrefix(AppSecModel):
    prefix: str = ""
    selector: str = ""


class SpecificHeaderCookieParamXmlOrJsonNames(AppSecModel):
    names: list[str] = Field(default_factory=list)
    selector: str = ""
    wildcard: bool = False


class SpecificHeaderCookieOrParamNameValue(AppSecModel):
    # name and value are free-form on the wire (string, list or object)
    name: Any = None
    selector: str = ""
    value: Any = None


class ConditionExceptionException(AppSecModel):
    any_header_cookie_or_param: list[str] = Field(default_factory=list)
    header_cookie_or_param_values: list[str] = Field(default_factory=list)
    specific_header_cookie_or_param_names: list[SpecificHeaderCookieOrParamNames] = Field(default_factory=list)
    specific_header_cookie_or_param_name_value: SpecificHeaderCookieOrParamNameValue | None = None
    specific_header_cookie_or_param_prefix: SpecificHeaderCookieOrParamPrefix | None = None
    specific_header_cookie_param_xml_or_json_names: list[SpecificHeaderCookieParamXmlOrJsonNames] = Field(
        default_factory=list
    )


# Adaptive Security Engine rules scope exceptions further with hostname/path criteria.
class AdvancedCriteria(AppSecModel):
    hostnames: list[str] = Field(default_factory=list)
    names: list[str] = Field(default_factory=list)
    paths: list[str] = Field(default_factory=list)
    values: list[str] = Field(default_factory=list)


class NamesValues(AppSecModel):
    names: list[str] = Field(default_factory=list)
    values: list[str] = Field(default_factory=list)


class AdvancedNameValue(AppSecModel):
    criteria: list[AdvancedCriteria] = Field(default_factory=list)
    names_values: list[NamesValues] = Field(default_factory=list)
    selector: str = ""
    value_wildcard: bool = False
    wildcard: bool = False


class AdvancedXmlOrJsonNames(AppSecModel):
    criteria: list[AdvancedCriteria] = Field(default_factory=list)
    names: list[str] = Field(default_factory=list)
    selector: str = ""
    wildcard: bool = False


class AdvancedHeaderCookieOrParamValues(AppSecModel):
    criteria: list[AdvancedCriteria] = Field(default_factory=list)
    value_wildcard: bool = False
    values: list[str] = Field(default_factory=list)


class AdvancedExceptions(AppSecModel):
    condition_operator: str = ""
    conditions: list[RuleCondition] = Field(default_factory=list)
    header_cookie_or_param_values: list[AdvancedHeaderCookieOrParamValues] = Field(default_factory=list)
    specific_header_cookie_or_param_name_value: list[AdvancedNameValue] = Field(default_factory=list)
    specific_header_cookie_param_xml_or_json_names: list[AdvancedXmlOrJsonNames] = Field(default_factory=list)


class RuleConditionException(AppSecModel):
    conditions: list[RuleCondition] = Field(default_factory=list)
    exception: ConditionExceptionException | None = None
    advanced_exceptions: AdvancedExceptions | None = None

    def is_empty(self) -> bool:
        return not self.conditions and self.exception is None and self.advanced_exceptions is None


class RemoveConditionExceptionBody(AppSecModel):
    """Body sent to clear a condition exception."""
    empty: str = ""
