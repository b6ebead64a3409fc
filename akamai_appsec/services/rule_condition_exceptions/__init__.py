"""Rule condition exception operations."""

from akamai_appsec.services.rule_condition_exceptions.rule_condition_exception_service import (
    get_rule_condition_exception,
    get_rule_condition_exceptions,
    remove_rule_condition_exception,
    update_rule_condition_exception,
)

__all__ = [
    "get_rule_condition_exception",
    "get_rule_condition_exceptions",
    "remove_rule_condition_exception",
    "update_rule_condition_exception",
]
