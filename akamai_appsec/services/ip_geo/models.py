"""IP/Geo firewall models and the policy protection switches that enable it."""

from __future__ import annotations

from typing import ClassVar

from pydantic import Field

from akamai_appsec.services.operation import AppSecModel, AppSecRequest

POLICY_FIELDS = ("config_id", "version", "policy_id")


class IPGeoNetworkLists(AppSecModel):
    network_list: list[str] | None = None


class IPGeoGeoControls(AppSecModel):
    blocked_ip_network_lists: IPGeoNetworkLists | None = Field(None, alias="blockedIPNetworkLists")


class IPGeoASNControls(AppSecModel):
    blocked_ip_network_lists: IPGeoNetworkLists | None = Field(None, alias="blockedIPNetworkLists")


class IPGeoIPControls(AppSecModel):
    allowed_ip_network_lists: IPGeoNetworkLists | None = Field(None, alias="allowedIPNetworkLists")
    blocked_ip_network_lists: IPGeoNetworkLists | None = Field(None, alias="blockedIPNetworkLists")


class UkraineGeoControl(AppSecModel):
    action: str = ""


class IPGeoFirewall(AppSecModel):
    """Firewall mode (``block``: blockSpecificIPGeo or blockAllTrafficExceptAllowedIPs)
    plus the network lists each control applies to."""
    block: str = ""
    geo_controls: IPGeoGeoControls | None = None
    ip_controls: IPGeoIPControls | None = Field(None, alias="ipControls")
    asn_controls: IPGeoASNControls | None = Field(None, alias="asnControls")
    ukraine_geo_control: UkraineGeoControl | None = None


class GetIPGeoRequest(AppSecRequest):
    config_id: int = Field(0, exclude=True)
    version: int = Field(0, exclude=True)
    policy_id: str = Field("", exclude=True)

    required_fields: ClassVar[tuple[str, ...]] = POLICY_FIELDS


class GetIPGeoResponse(IPGeoFirewall):
    pass


class UpdateIPGeoRequest(AppSecRequest):
    config_id: int = Field(0, exclude=True)
    version: int = Field(0, exclude=True)
    policy_id: str = Field("", exclude=True)
    block: str = ""
    geo_controls: IPGeoGeoControls | None = None
    ip_controls: IPGeoIPControls | None = Field(None, alias="ipControls")
    asn_controls: IPGeoASNControls | None = Field(None, alias="asnControls")
    ukraine_geo_control: UkraineGeoControl | None = None

    required_fields: ClassVar[tuple[str, ...]] = POLICY_FIELDS


class UpdateIPGeoResponse(IPGeoFirewall):
    pass


class PolicyProtections(AppSecModel):
    apply_api_constraints: bool = Field(False, alias="applyApiConstraints")
    apply_application_layer_controls: bool = False
    apply_botman_controls: bool = False
    apply_malware_controls: bool = False
    apply_network_layer_controls: bool = False
    apply_rate_controls: bool = False
    apply_reputation_controls: bool = False
    apply_slow_post_controls: bool = False


class GetIPGeoProtectionsRequest(AppSecRequest):
    config_id: int = Field(0, exclude=True)
    version: int = Field(0, exclude=True)
    policy_id: str = Field("", exclude=True)

    required_fields: ClassVar[tuple[str, ...]] = POLICY_FIELDS


class GetIPGeoProtectionsResponse(PolicyProtections):
    pass


class GetIPGeoProtectionRequest(AppSecRequest):
    config_id: int = Field(0, exclude=True)
    version: int = Field(0, exclude=True)
    policy_id: str = Field("", exclude=True)

    required_fields: ClassVar[tuple[str, ...]] = POLICY_FIELDS


class GetIPGeoProtectionResponse(PolicyProtections):
    pass


class UpdateIPGeoProtectionRequest(AppSecRequest):
    """Only the network layer switch is sent; the other protections are left as they are."""
    config_id: int = Field(0, exclude=True)
    version: int = Field(0, exclude=True)
    policy_id: str = Field("", exclude=True)
    apply_network_layer_controls: bool = False

    required_fields: ClassVar[tuple[str, ...]] = POLICY_FIELDS


class UpdateIPGeoProtectionResponse(PolicyProtections):
    pass
