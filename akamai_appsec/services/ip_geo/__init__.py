"""IP/Geo firewall and IP/Geo protection operations."""

from akamai_appsec.services.ip_geo.ip_geo_protection_service import (
    get_ip_geo_protection,
    get_ip_geo_protections,
    update_ip_geo_protection,
)
from akamai_appsec.services.ip_geo.ip_geo_service import get_ip_geo, update_ip_geo

__all__ = [
    "get_ip_geo",
    "get_ip_geo_protection",
    "get_ip_geo_protections",
    "update_ip_geo",
    "update_ip_geo_protection",
]
