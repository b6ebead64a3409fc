"""Configuration schema using Pydantic.

Client settings persisted to ~/.akamai-appsec/config.json and overridable from the
environment (AKAMAI_APPSEC_BASE_URL, AKAMAI_APPSEC_HEADERS__X_FOO, ...).
"""

from pydantic import ConfigDict, Field
from pydantic_settings import BaseSettings


class ClientConfig(BaseSettings):
    """Root configuration for an Application Security API client."""
    base_url: str = ""  # e.g. https://akab-xxxx.luna.akamaiapis.net
    timeout_seconds: float = 30.0
    user_agent: str = ""  # empty means the library default
    account_switch_key: str = ""
    headers: dict[str, str] = Field(default_factory=dict)  # sent with every request
    trace: bool = False  # dump requests and responses at DEBUG
    log_level: str = "INFO"
    log_file: str = ""  # rotating library log; empty disables it

    @property
    def normalized_base_url(self) -> str:
        base = self.base_url.strip().rstrip("/")
        if base and "://" not in base:
            base = f"https://{base}"
        return base

    model_config = ConfigDict(
        env_prefix="AKAMAI_APPSEC_",
        env_nested_delimiter="__",
    )
