"""Hostname coverage request/response models."""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import Field

from akamai_appsec.services.operation import AppSecModel, AppSecRequest


class GetApiHostnameCoverageRequest(AppSecRequest):
    """The coverage endpoint is account wide; the identifiers are accepted but unused."""
    config_id: int = Field(0, exclude=True)
    version: int = Field(0, exclude=True)


class CoverageConfiguration(AppSecModel):
    id: int = 0
    name: str = ""
    version: int = 0


class HostnameCoverage(AppSecModel):
    configuration: CoverageConfiguration | None = None
    status: str = ""
    has_match_target: bool = False
    hostname: str = ""
    policy_names: list[str] = Field(default_factory=list)


class GetApiHostnameCoverageResponse(AppSecModel):
    hostname_coverage: list[HostnameCoverage] = Field(default_factory=list)


class GetApiHostnameCoverageOverlappingRequest(AppSecRequest):
    config_id: int = Field(0, exclude=True)
    version: int = Field(0, exclude=True)
    hostname: str = Field("", exclude=True)

    required_fields: ClassVar[tuple[str, ...]] = ("config_id", "version")


class OverlappingConfiguration(AppSecModel):
    config_id: int = 0
    config_name: str = ""
    config_versions: list[int] = Field(default_factory=list)
    contract_id: str = ""
    contract_name: str = ""


class GetApiHostnameCoverageOverlappingResponse(AppSecModel):
    overlapping_list: list[OverlappingConfiguration] = Field(default_factory=list, alias="overLappingList")


class GetApiHostnameCoverageMatchTargetsRequest(AppSecRequest):
    config_id: int = Field(0, exclude=True)
    version: int = Field(0, exclude=True)
    hostname: str = Field("", exclude=True)

    required_fields: ClassVar[tuple[str, ...]] = ("config_id", "version")


class NetworkListRef(AppSecModel):
    id: str = ""
    name: str = ""


class EffectiveSecurityControls(AppSecModel):
    apply_application_layer_controls: bool = False
    apply_botman_controls: bool = False
    apply_network_layer_controls: bool = False
    apply_page_integrity_controls: bool = False
    apply_rate_controls: bool = False
    apply_slow_post_controls: bool = False


class PolicySecurityControls(AppSecModel):
    apply_api_constraints: bool = False
    apply_application_layer_controls: bool = False
    apply_botman_controls: bool = False
    apply_network_layer_controls: bool = False
    apply_page_integrity_controls: bool = False
    apply_rate_controls: bool = False
    apply_reputation_controls: bool = False
    apply_slow_post_controls: bool = False


class FirewallPolicy(AppSecModel):
    evaluated: bool = False
    policy_id: str = ""
    policy_name: str = ""
    policy_security_controls: PolicySecurityControls | None = None


class TargetSecurityControls(AppSecModel):
    apply_application_layer_controls: bool = False
    apply_network_layer_controls: bool = False
    apply_page_integrity_controls: bool = False
    apply_rate_controls: bool = False
    apply_reputation_controls: bool = False
    apply_slow_post_controls: bool = False
    type: str = ""


class CoverageWebsiteTarget(AppSecModel):
    """A website match target as reported by the hostname coverage view.

    This differs from the configuration's own match-target listing (see
    ``services.match_targets.models``): coverage entries carry the evaluated firewall
    policy and the effective controls instead of a bare ``securityPolicy`` reference.
    """
    bypass_network_lists: list[NetworkListRef] = Field(default_factory=list)
    config_id: int = 0
    config_version: int = 0
    default_file: str = ""
    effective_security_controls: EffectiveSecurityControls | None = None
    file_extensions: list[Any] = Field(default_factory=list)
    file_paths: list[str] = Field(default_factory=list)
    firewall_policy: FirewallPolicy | None = None
    hostnames: list[str] = Field(default_factory=list)
    is_negative_file_extension_match: bool = False
    is_negative_path_match: bool = False
    is_target_security_controls_editable: bool = False
    logical_id: int = 0
    sequence: int = 0
    target_id: int = 0
    target_security_controls: TargetSecurityControls | None = None


class CoverageMatchTargets(AppSecModel):
    api_targets: list[Any] = Field(default_factory=list, alias="apiTargets")
    website_targets: list[CoverageWebsiteTarget] = Field(default_factory=list)


class GetApiHostnameCoverageMatchTargetsResponse(AppSecModel):
    match_targets: CoverageMatchTargets = Field(default_factory=CoverageMatchTargets)
