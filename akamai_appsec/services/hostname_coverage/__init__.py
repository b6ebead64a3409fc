"""Hostname coverage operations."""

from akamai_appsec.services.hostname_coverage.hostname_coverage_service import (
    get_api_hostname_coverage,
    get_api_hostname_coverage_match_targets,
    get_api_hostname_coverage_overlapping,
)

__all__ = [
    "get_api_hostname_coverage",
    "get_api_hostname_coverage_match_targets",
    "get_api_hostname_coverage_overlapping",
]
