"""Configuration module for akamai_appsec."""

from akamai_appsec.config.loader import load_config, get_config_path, save_config
from akamai_appsec.config.schema import ClientConfig

__all__ = ["ClientConfig", "load_config", "save_config", "get_config_path"]
