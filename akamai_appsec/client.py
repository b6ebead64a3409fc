"""Application Security client: one session, every operation as a method."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from akamai_appsec import services
from akamai_appsec.config.loader import load_config
from akamai_appsec.config.schema import ClientConfig
from akamai_appsec.services.eval_rules import models as eval_models
from akamai_appsec.services.hostname_coverage import models as coverage_models
from akamai_appsec.services.ip_geo import models as ip_geo_models
from akamai_appsec.services.match_targets import models as match_target_models
from akamai_appsec.services.rule_condition_exceptions import models as rule_models
from akamai_appsec.session.session import RequestContext, Session
from akamai_appsec.utils.logging_utils import configure_logging


class AppSec:
    """Wraps a Session. Close it (or use ``with``) to release the underlying httpx client."""

    def __init__(self, session: Session):
        self.session = session

    # hostname coverage

    def get_api_hostname_coverage(
        self, params: coverage_models.GetApiHostnameCoverageRequest, ctx: RequestContext | None = None
    ) -> coverage_models.GetApiHostnameCoverageResponse:
        return services.get_api_hostname_coverage(self.session, params, ctx)

    def get_api_hostname_coverage_overlapping(
        self, params: coverage_models.GetApiHostnameCoverageOverlappingRequest, ctx: RequestContext | None = None
    ) -> coverage_models.GetApiHostnameCoverageOverlappingResponse:
        return services.get_api_hostname_coverage_overlapping(self.session, params, ctx)

    def get_api_hostname_coverage_match_targets(
        self, params: coverage_models.GetApiHostnameCoverageMatchTargetsRequest, ctx: RequestContext | None = None
    ) -> coverage_models.GetApiHostnameCoverageMatchTargetsResponse:
        return services.get_api_hostname_coverage_match_targets(self.session, params, ctx)

    # match targets

    def get_match_targets(
        self, params: match_target_models.GetMatchTargetsRequest, ctx: RequestContext | None = None
    ) -> match_target_models.GetMatchTargetsResponse:
        return services.get_match_targets(self.session, params, ctx)

    def get_match_target(
        self, params: match_target_models.GetMatchTargetRequest, ctx: RequestContext | None = None
    ) -> match_target_models.GetMatchTargetResponse:
        return services.get_match_target(self.session, params, ctx)

    # eval rules

    def get_eval_rules(
        self, params: eval_models.GetEvalRulesRequest, ctx: RequestContext | None = None
    ) -> eval_models.GetEvalRulesResponse:
        return services.get_eval_rules(self.session, params, ctx)

    def get_eval_rule(
        self, params: eval_models.GetEvalRuleRequest, ctx: RequestContext | None = None
    ) -> eval_models.GetEvalRuleResponse:
        return services.get_eval_rule(self.session, params, ctx)

    def update_eval_rule(
        self, params: eval_models.UpdateEvalRuleRequest, ctx: RequestContext | None = None
    ) -> eval_models.UpdateEvalRuleResponse:
        return services.update_eval_rule(self.session, params, ctx)

    def get_eval_rule_actions(
        self, params: eval_models.GetEvalRuleActionsRequest, ctx: RequestContext | None = None
    ) -> eval_models.GetEvalRuleActionsResponse:
        return services.get_eval_rule_actions(self.session, params, ctx)

    def get_eval_rule_action(
        self, params: eval_models.GetEvalRuleActionRequest, ctx: RequestContext | None = None
    ) -> eval_models.GetEvalRuleActionResponse:
        return services.get_eval_rule_action(self.session, params, ctx)

    def update_eval_rule_action(
        self, params: eval_models.UpdateEvalRuleActionRequest, ctx: RequestContext | None = None
    ) -> eval_models.UpdateEvalRuleActionResponse:
        return services.update_eval_rule_action(self.session, params, ctx)

    def get_eval_rule_condition_exceptions(
        self, params: eval_models.GetEvalRuleConditionExceptionsRequest, ctx: RequestContext | None = None
    ) -> eval_models.GetEvalRuleConditionExceptionsResponse:
        return services.get_eval_rule_condition_exceptions(self.session, params, ctx)

    def get_eval_rule_condition_exception(
        self, params: eval_models.GetEvalRuleConditionExceptionRequest, ctx: RequestContext | None = None
    ) -> eval_models.GetEvalRuleConditionExceptionResponse:
        return services.get_eval_rule_condition_exception(self.session, params, ctx)

    def update_eval_rule_condition_exception(
        self, params: eval_models.UpdateEvalRuleConditionExceptionRequest, ctx: RequestContext | None = None
    ) -> eval_models.UpdateEvalRuleConditionExceptionResponse:
        return services.update_eval_rule_condition_exception(self.session, params, ctx)

    def remove_eval_rule_condition_exception(
        self, params: eval_models.RemoveEvalRuleConditionExceptionRequest, ctx: RequestContext | None = None
    ) -> eval_models.RemoveEvalRuleConditionExceptionResponse:
        return services.remove_eval_rule_condition_exception(self.session, params, ctx)

    # rule condition exceptions

    def get_rule_condition_exceptions(
        self, params: rule_models.GetRuleConditionExceptionsRequest, ctx: RequestContext | None = None
    ) -> rule_models.GetRuleConditionExceptionsResponse:
        return services.get_rule_condition_exceptions(self.session, params, ctx)

    def get_rule_condition_exception(
        self, params: rule_models.GetRuleConditionExceptionRequest, ctx: RequestContext | None = None
    ) -> rule_models.GetRuleConditionExceptionResponse:
        return services.get_rule_condition_exception(self.session, params, ctx)

    def update_rule_condition_exception(
        self, params: rule_models.UpdateRuleConditionExceptionRequest, ctx: RequestContext | None = None
    ) -> rule_models.UpdateRuleConditionExceptionResponse:
        return services.update_rule_condition_exception(self.session, params, ctx)

    def remove_rule_condition_exception(
        self, params: rule_models.RemoveRuleConditionExceptionRequest, ctx: RequestContext | None = None
    ) -> rule_models.RemoveRuleConditionExceptionResponse:
        return services.remove_rule_condition_exception(self.session, params, ctx)

    # ip/geo firewall

    def get_ip_geo(
        self, params: ip_geo_models.GetIPGeoRequest, ctx: RequestContext | None = None
    ) -> ip_geo_models.GetIPGeoResponse:
        return services.get_ip_geo(self.session, params, ctx)

    def update_ip_geo(
        self, params: ip_geo_models.UpdateIPGeoRequest, ctx: RequestContext | None = None
    ) -> ip_geo_models.UpdateIPGeoResponse:
        return services.update_ip_geo(self.session, params, ctx)

    def get_ip_geo_protections(
        self, params: ip_geo_models.GetIPGeoProtectionsRequest, ctx: RequestContext | None = None
    ) -> ip_geo_models.GetIPGeoProtectionsResponse:
        return services.get_ip_geo_protections(self.session, params, ctx)

    def get_ip_geo_protection(
        self, params: ip_geo_models.GetIPGeoProtectionRequest, ctx: RequestContext | None = None
    ) -> ip_geo_models.GetIPGeoProtectionResponse:
        return services.get_ip_geo_protection(self.session, params, ctx)

    def update_ip_geo_protection(
        self, params: ip_geo_models.UpdateIPGeoProtectionRequest, ctx: RequestContext | None = None
    ) -> ip_geo_models.UpdateIPGeoProtectionResponse:
        return services.update_ip_geo_protection(self.session, params, ctx)

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "AppSec":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def new_client(config: ClientConfig | None = None, **session_kwargs: Any) -> AppSec:
    """Build an AppSec client from ``config`` (read fresh from the config file and environment when omitted).

    Keyword arguments (``auth``, ``client``, ``log`` ...) go to :meth:`Session.from_config`.
    """
    if config is None:
        config = load_config()
    if config.log_file:
        configure_logging(config.log_level, Path(config.log_file).expanduser())
    return AppSec(Session.from_config(config, **session_kwargs))
