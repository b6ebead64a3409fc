import json

import httpx

import akamai_appsec
from akamai_appsec import client as client_module
from akamai_appsec.client import AppSec, new_client
from akamai_appsec.config.schema import ClientConfig
from akamai_appsec.services.eval_rules.models import GetEvalRuleActionsRequest
from akamai_appsec.services.ip_geo.models import GetIPGeoRequest
from akamai_appsec.services.match_targets.models import GetMatchTargetsRequest
from akamai_appsec.services.rule_condition_exceptions.models import RemoveRuleConditionExceptionRequest
from akamai_appsec.session.session import RequestContext
from akamai_appsec.utils.logging_utils import remove_logging


def _mock_client(requests):
    def _handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        if request.url.path.endswith("/ip-geo-firewall"):
            return httpx.Response(200, json={"block": "blockSpecificIPGeo"})
        if request.url.path.endswith("/eval-rules"):
            return httpx.Response(200, json={"evalRuleActions": [{"action": "alert", "id": 1}]})
        return httpx.Response(200, json={})

    return httpx.Client(transport=httpx.MockTransport(_handler))


def test_new_client_builds_session_from_config() -> None:
    requests: list[httpx.Request] = []
    config = ClientConfig(base_url="akab-abc.luna.akamaiapis.net", account_switch_key="1-XYZ")

    with new_client(config, client=_mock_client(requests)) as appsec:
        result = appsec.get_ip_geo(GetIPGeoRequest(config_id=43253, version=15, policy_id="AAAA_81230"))

    assert isinstance(appsec, AppSec)
    assert result.block == "blockSpecificIPGeo"
    assert requests[0].url.host == "akab-abc.luna.akamaiapis.net"
    assert requests[0].url.params["accountSwitchKey"] == "1-XYZ"


def test_new_client_defaults_to_loaded_config(monkeypatch) -> None:
    monkeypatch.setattr(client_module, "load_config", lambda: ClientConfig(base_url="https://from-file.example"))

    appsec = new_client(client=_mock_client([]))

    assert appsec.session.base_url == "https://from-file.example"


def test_new_client_rereads_config_file_each_call(tmp_path) -> None:
    path = tmp_path / "home" / ".akamai-appsec" / "config.json"
    path.parent.mkdir(parents=True)
    path.write_text(json.dumps({"baseUrl": "https://first.example"}), encoding="utf-8")

    first = new_client(client=_mock_client([]))
    path.write_text(json.dumps({"baseUrl": "https://second.example"}), encoding="utf-8")
    second = new_client(client=_mock_client([]))

    assert first.session.base_url == "https://first.example"
    assert second.session.base_url == "https://second.example"


def test_facade_forwards_context() -> None:
    requests: list[httpx.Request] = []
    appsec = new_client(ClientConfig(base_url="https://host.example"), client=_mock_client(requests))
    ctx = RequestContext(headers={"X-Correlation-Id": "c-1"})

    actions = appsec.get_eval_rule_actions(
        GetEvalRuleActionsRequest(config_id=43253, version=15, policy_id="AAAA_81230"), ctx
    )
    appsec.get_match_targets(GetMatchTargetsRequest(config_id=43253, version=15), ctx)
    appsec.remove_rule_condition_exception(
        RemoveRuleConditionExceptionRequest(config_id=43253, version=15, policy_id="AAAA_81230", rule_id=7), ctx
    )

    assert actions.rule_actions[0].action == "alert"
    assert [r.method for r in requests] == ["GET", "GET", "PUT"]
    assert all(r.headers["X-Correlation-Id"] == "c-1" for r in requests)


def test_package_exports() -> None:
    assert akamai_appsec.__version__
    assert akamai_appsec.new_client is new_client
    assert issubclass(akamai_appsec.ApiError, akamai_appsec.AppSecError)


def test_new_client_installs_log_sink_when_configured(tmp_path) -> None:
    log_file = tmp_path / "appsec.log"
    config = ClientConfig(base_url="https://host.example", log_file=str(log_file), log_level="DEBUG")
    appsec = new_client(config, client=_mock_client([]))
    try:
        appsec.get_ip_geo(GetIPGeoRequest(config_id=43253, version=15, policy_id="AAAA_81230"))
    finally:
        remove_logging(log_file)

    assert "GetIPGeo" in log_file.read_text(encoding="utf-8")
