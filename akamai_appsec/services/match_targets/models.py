"""Configuration match-target models."""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import Field

from akamai_appsec.services.operation import AppSecModel, AppSecRequest


class GetMatchTargetsRequest(AppSecRequest):
    """``target_id`` is optional; when set the listing is narrowed client side."""
    config_id: int = Field(0, exclude=True)
    version: int = Field(0, exclude=True)
    target_id: int = Field(0, exclude=True)

    required_fields: ClassVar[tuple[str, ...]] = ("config_id", "version")


class GetMatchTargetRequest(AppSecRequest):
    config_id: int = Field(0, exclude=True)
    version: int = Field(0, exclude=True)
    target_id: int = Field(0, exclude=True)

    required_fields: ClassVar[tuple[str, ...]] = ("config_id", "version", "target_id")


class SecurityPolicyRef(AppSecModel):
    policy_id: str = ""


class BypassNetworkList(AppSecModel):
    id: str = ""
    name: str = ""


class ApiRef(AppSecModel):
    id: int = 0
    name: str = ""


class ApiMatchTarget(AppSecModel):
    type: str = ""
    apis: list[ApiRef] = Field(default_factory=list)
    sequence: int = 0
    target_id: int = 0
    config_id: int = 0
    config_version: int = 0
    security_policy: SecurityPolicyRef | None = None
    bypass_network_lists: list[BypassNetworkList] = Field(default_factory=list)


class WebsiteMatchTarget(AppSecModel):
    type: str = ""
    config_id: int = 0
    config_version: int = 0
    default_file: str = ""
    is_negative_file_extension_match: bool = False
    is_negative_path_match: Any = None  # bool on current versions, absent or null on some
    sequence: int = 0
    target_id: int = 0
    file_extensions: list[str] = Field(default_factory=list)
    file_paths: list[str] = Field(default_factory=list)
    hostnames: list[str] = Field(default_factory=list)
    security_policy: SecurityPolicyRef | None = None
    bypass_network_lists: list[BypassNetworkList] = Field(default_factory=list)


class MatchTargets(AppSecModel):
    api_targets: list[ApiMatchTarget] = Field(default_factory=list)
    website_targets: list[WebsiteMatchTarget] = Field(default_factory=list)


class GetMatchTargetsResponse(AppSecModel):
    match_targets: MatchTargets = Field(default_factory=MatchTargets)


class GetMatchTargetResponse(AppSecModel):
    type: str = ""
    apis: list[ApiRef] = Field(default_factory=list)
    default_file: str = ""
    hostnames: list[str] = Field(default_factory=list)
    is_negative_file_extension_match: bool = False
    is_negative_path_match: Any = None
    file_paths: list[str] = Field(default_factory=list)
    file_extensions: list[str] = Field(default_factory=list)
    security_policy: SecurityPolicyRef | None = None
    sequence: int = 0
    target_id: int = 0
    bypass_network_lists: list[BypassNetworkList] = Field(default_factory=list)
