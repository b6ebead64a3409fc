import httpx
import pytest

from akamai_appsec.services.match_targets import get_match_target, get_match_targets
from akamai_appsec.services.match_targets.models import GetMatchTargetRequest, GetMatchTargetsRequest
from akamai_appsec.utils.exceptions import ApiError, ValidationError

MATCH_TARGETS = {
    "matchTargets": {
        "apiTargets": [
            {
                "type": "api",
                "apis": [{"id": 619183, "name": "Example API"}],
                "sequence": 2,
                "targetId": 3008967,
                "configId": 43253,
                "configVersion": 15,
                "securityPolicy": {"policyId": "AAAA_81230"},
            }
        ],
        "websiteTargets": [
            {
                "type": "website",
                "configId": 43253,
                "configVersion": 15,
                "defaultFile": "NO_MATCH",
                "hostnames": ["www.example.com"],
                "filePaths": ["/*"],
                "isNegativePathMatch": False,
                "sequence": 1,
                "targetId": 2712938,
                "securityPolicy": {"policyId": "AAAA_81230"},
                "bypassNetworkLists": [{"id": "1410_BYPASS", "name": "Bypass list"}],
            },
            {
                "type": "website",
                "hostnames": ["static.example.com"],
                "sequence": 3,
                "targetId": 2712939,
                "securityPolicy": {"policyId": "BBBB_11111"},
            },
        ],
    }
}


def _ok(request: httpx.Request) -> httpx.Response:
    return httpx.Response(200, json=MATCH_TARGETS)


def test_get_match_targets_returns_everything_without_target_id(make_session) -> None:
    session, requests = make_session(_ok)

    result = get_match_targets(session, GetMatchTargetsRequest(config_id=43253, version=15))

    assert requests[0].url.raw_path.decode() == "/appsec/v1/configs/43253/versions/15/match-targets"
    assert [t.target_id for t in result.match_targets.website_targets] == [2712938, 2712939]
    assert [t.target_id for t in result.match_targets.api_targets] == [3008967]
    assert result.match_targets.api_targets[0].apis[0].name == "Example API"


def test_get_match_targets_filters_by_target_id(make_session) -> None:
    session, _ = make_session(_ok)

    result = get_match_targets(session, GetMatchTargetsRequest(config_id=43253, version=15, target_id=2712939))

    assert [t.target_id for t in result.match_targets.website_targets] == [2712939]
    assert result.match_targets.api_targets == []


def test_get_match_targets_unknown_target_id_gives_empty_lists(make_session) -> None:
    session, _ = make_session(_ok)

    result = get_match_targets(session, GetMatchTargetsRequest(config_id=43253, version=15, target_id=1))

    assert result.match_targets.website_targets == []
    assert result.match_targets.api_targets == []


def test_get_match_target(make_session) -> None:
    single = MATCH_TARGETS["matchTargets"]["websiteTargets"][0]
    session, requests = make_session(lambda request: httpx.Response(200, json=single))

    result = get_match_target(session, GetMatchTargetRequest(config_id=43253, version=15, target_id=2712938))

    assert requests[0].url.raw_path.decode() == "/appsec/v1/configs/43253/versions/15/match-targets/2712938"
    assert result.target_id == 2712938
    assert result.security_policy.policy_id == "AAAA_81230"
    assert result.bypass_network_lists[0].id == "1410_BYPASS"


def test_get_match_target_requires_target_id(make_session) -> None:
    session, requests = make_session(_ok)

    with pytest.raises(ValidationError) as exc_info:
        get_match_target(session, GetMatchTargetRequest(config_id=43253, version=15))

    assert exc_info.value.errors == {"target_id": "cannot be blank"}
    assert requests == []


def test_get_match_target_not_found(make_session) -> None:
    body = {"type": "not_found", "title": "Not Found", "detail": "Match target 5 not found", "status": 404}
    session, _ = make_session(lambda request: httpx.Response(404, json=body))

    with pytest.raises(ApiError) as exc_info:
        get_match_target(session, GetMatchTargetRequest(config_id=43253, version=15, target_id=5))

    assert exc_info.value.status_code == 404
    assert exc_info.value.title == "Not Found"
