"""Evaluation rule operations: rules, rule actions and condition exceptions."""

from akamai_appsec.services.eval_rules.eval_rule_action_service import (
    get_eval_rule_action,
    get_eval_rule_actions,
    update_eval_rule_action,
)
from akamai_appsec.services.eval_rules.eval_rule_condition_exception_service import (
    get_eval_rule_condition_exception,
    get_eval_rule_condition_exceptions,
    remove_eval_rule_condition_exception,
    update_eval_rule_condition_exception,
)
from akamai_appsec.services.eval_rules.eval_rule_service import get_eval_rule, get_eval_rules, update_eval_rule

__all__ = [
    "get_eval_rule",
    "get_eval_rule_action",
    "get_eval_rule_actions",
    "get_eval_rule_condition_exception",
    "get_eval_rule_condition_exceptions",
    "get_eval_rules",
    "remove_eval_rule_condition_exception",
    "update_eval_rule",
    "update_eval_rule_action",
    "update_eval_rule_condition_exception",
]
