"""Application Security operations grouped by resource."""

from akamai_appsec.services.eval_rules import (
    get_eval_rule,
    get_eval_rule_action,
    get_eval_rule_actions,
    get_eval_rule_condition_exception,
    get_eval_rule_condition_exceptions,
    get_eval_rules,
    remove_eval_rule_condition_exception,
    update_eval_rule,
    update_eval_rule_action,
    update_eval_rule_condition_exception,
)
from akamai_appsec.services.hostname_coverage import (
    get_api_hostname_coverage,
    get_api_hostname_coverage_match_targets,
    get_api_hostname_coverage_overlapping,
)
from akamai_appsec.services.ip_geo import (
    get_ip_geo,
    get_ip_geo_protection,
    get_ip_geo_protections,
    update_ip_geo,
    update_ip_geo_protection,
)
from akamai_appsec.services.match_targets import get_match_target, get_match_targets
from akamai_appsec.services.rule_condition_exceptions import (
    get_rule_condition_exception,
    get_rule_condition_exceptions,
    remove_rule_condition_exception,
    update_rule_condition_exception,
)

__all__ = [
    "get_api_hostname_coverage",
    "get_api_hostname_coverage_match_targets",
    "get_api_hostname_coverage_overlapping",
    "get_eval_rule",
    "get_eval_rule_action",
    "get_eval_rule_actions",
    "get_eval_rule_condition_exception",
    "get_eval_rule_condition_exceptions",
    "get_eval_rules",
    "get_ip_geo",
    "get_ip_geo_protection",
    "get_ip_geo_protections",
    "get_match_target",
    "get_match_targets",
    "get_rule_condition_exception",
    "get_rule_condition_exceptions",
    "remove_eval_rule_condition_exception",
    "remove_rule_condition_exception",
    "update_eval_rule",
    "update_eval_rule_action",
    "update_eval_rule_condition_exception",
    "update_ip_geo",
    "update_ip_geo_protection",
    "update_rule_condition_exception",
]
