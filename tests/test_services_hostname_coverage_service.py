import httpx
import pytest

from akamai_appsec.services.hostname_coverage import (
    get_api_hostname_coverage,
    get_api_hostname_coverage_match_targets,
    get_api_hostname_coverage_overlapping,
)
from akamai_appsec.services.hostname_coverage.models import (
    CoverageConfiguration,
    GetApiHostnameCoverageMatchTargetsRequest,
    GetApiHostnameCoverageOverlappingRequest,
    GetApiHostnameCoverageRequest,
    HostnameCoverage,
)
from akamai_appsec.utils.exceptions import ApiError, ValidationError

COVERAGE = {
    "hostnameCoverage": [
        {
            "configuration": {"id": 43253, "name": "Example config", "version": 15},
            "status": "covered",
            "hasMatchTarget": True,
            "hostname": "www.example.com",
            "policyNames": ["Example policy"],
        },
        {"status": "not_covered", "hasMatchTarget": False, "hostname": "api.example.com"},
    ]
}

MATCH_TARGETS = {
    "matchTargets": {
        "apiTargets": [],
        "websiteTargets": [
            {
                "configId": 43253,
                "configVersion": 15,
                "defaultFile": "NO_MATCH",
                "effectiveSecurityControls": {
                    "applyApplicationLayerControls": True,
                    "applyNetworkLayerControls": True,
                },
                "filePaths": ["/*"],
                "firewallPolicy": {
                    "evaluated": False,
                    "policyId": "AAAA_81230",
                    "policyName": "Example policy",
                    "policySecurityControls": {"applyApiConstraints": False, "applyRateControls": True},
                },
                "hostnames": ["www.example.com"],
                "isNegativePathMatch": False,
                "sequence": 1,
                "targetId": 2712938,
                "targetSecurityControls": {"applyRateControls": True, "type": "website"},
            }
        ],
    }
}


def test_get_api_hostname_coverage_is_account_wide(make_session) -> None:
    session, requests = make_session(lambda request: httpx.Response(200, json=COVERAGE))

    result = get_api_hostname_coverage(session, GetApiHostnameCoverageRequest(config_id=43253, version=15))

    assert requests[0].method == "GET"
    assert requests[0].url.raw_path.decode() == "/appsec/v1/hostname-coverage"
    assert len(result.hostname_coverage) == 2
    assert result.hostname_coverage[0] == HostnameCoverage(
        configuration=CoverageConfiguration(id=43253, name="Example config", version=15),
        status="covered",
        has_match_target=True,
        hostname="www.example.com",
        policy_names=["Example policy"],
    )
    assert result.hostname_coverage[1].configuration is None


def test_get_api_hostname_coverage_needs_no_identifiers(make_session) -> None:
    session, requests = make_session(lambda request: httpx.Response(200, json={"hostnameCoverage": []}))

    result = get_api_hostname_coverage(session, GetApiHostnameCoverageRequest())

    assert len(requests) == 1
    assert result.hostname_coverage == []


def test_get_api_hostname_coverage_server_error(make_session, internal_error_body) -> None:
    session, _ = make_session(lambda request: httpx.Response(500, json=internal_error_body))

    with pytest.raises(ApiError) as exc_info:
        get_api_hostname_coverage(session, GetApiHostnameCoverageRequest())

    assert exc_info.value == ApiError(
        type="internal_error",
        title="Internal Server Error",
        detail="Error fetching data",
        status_code=500,
    )


def test_get_overlapping_sends_empty_hostname_query(make_session) -> None:
    payload = {
        "overLappingList": [
            {
                "configId": 42345,
                "configName": "Other config",
                "configVersions": [3, 4],
                "contractId": "C-0N7RAC7",
                "contractName": "Example contract",
            }
        ]
    }
    session, requests = make_session(lambda request: httpx.Response(200, json=payload))

    result = get_api_hostname_coverage_overlapping(
        session, GetApiHostnameCoverageOverlappingRequest(config_id=43253, version=15)
    )

    assert requests[0].url.raw_path.decode() == (
        "/appsec/v1/configs/43253/versions/15/hostname-coverage/overlapping?hostname="
    )
    assert result.overlapping_list[0].config_id == 42345
    assert result.overlapping_list[0].config_versions == [3, 4]


def test_get_overlapping_requires_config_and_version(make_session) -> None:
    session, requests = make_session(lambda request: httpx.Response(200, json={}))

    with pytest.raises(ValidationError) as exc_info:
        get_api_hostname_coverage_overlapping(session, GetApiHostnameCoverageOverlappingRequest(hostname="x"))

    assert set(exc_info.value.errors) == {"config_id", "version"}
    assert requests == []


def test_get_coverage_match_targets(make_session) -> None:
    session, requests = make_session(lambda request: httpx.Response(200, json=MATCH_TARGETS))

    result = get_api_hostname_coverage_match_targets(
        session,
        GetApiHostnameCoverageMatchTargetsRequest(config_id=43253, version=15, hostname="www.example.com"),
    )

    assert requests[0].url.raw_path.decode() == (
        "/appsec/v1/configs/43253/versions/15/hostname-coverage/match-targets?hostname=www.example.com"
    )
    target = result.match_targets.website_targets[0]
    assert target.target_id == 2712938
    assert target.firewall_policy.policy_id == "AAAA_81230"
    assert target.firewall_policy.policy_security_controls.apply_rate_controls is True
    assert target.effective_security_controls.apply_network_layer_controls is True
    assert target.target_security_controls.type == "website"
    assert result.match_targets.api_targets == []


def test_get_coverage_match_targets_missing_version(make_session) -> None:
    session, requests = make_session(lambda request: httpx.Response(200, json={}))

    with pytest.raises(ValidationError, match="version: cannot be blank"):
        get_api_hostname_coverage_match_targets(
            session, GetApiHostnameCoverageMatchTargetsRequest(config_id=43253, hostname="www.example.com")
        )
    assert requests == []
