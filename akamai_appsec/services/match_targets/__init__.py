"""Match target operations."""

from akamai_appsec.services.match_targets.match_target_service import get_match_target, get_match_targets

__all__ = ["get_match_target", "get_match_targets"]
