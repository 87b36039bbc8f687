"""Solr endpoint configuration (``solr`` section)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from SolrBuilder.config.common import get_section, read_value

DEFAULT_GET_URL = "/myservices/search-service/doRequest/dp-content/dprender"
DEFAULT_POST_URL = ""
DEFAULT_TIMEOUT = 30.0
DEFAULT_USER_AGENT = "solr-builder/0.1"


@dataclass(frozen=True, slots=True)
class SolrConfig:
    """Store validated Solr endpoint and transport settings.

    Attributes:
        get_url: Endpoint used by GET queries when no base URL is given.
        post_url: Endpoint used by POST queries when no base URL is given.
        timeout: Request timeout in seconds, ``None`` to wait indefinitely.
        user_agent: User-Agent header sent by the default HTTP client.
    """

    get_url: str = DEFAULT_GET_URL
    post_url: str = DEFAULT_POST_URL
    timeout: float | None = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT


def default_solr_config() -> SolrConfig:
    """Return built-in Solr defaults used when no config file is loaded."""
    return SolrConfig()


def load_solr(raw: Mapping[str, Any]) -> SolrConfig:
    """Read and validate the ``solr`` section; missing keys use the defaults.

    Raises:
        TypeError: If a value has the wrong type.
        ValueError: If an endpoint carries a query string, the timeout is not
            positive, or the user agent is blank.
    """
    section = get_section(raw, "solr")
    timeout = read_value(section, "timeout", DEFAULT_TIMEOUT, (int, float), "solr.timeout", nullable=True)
    config = SolrConfig(
        get_url=read_value(section, "get_url", DEFAULT_GET_URL, str, "solr.get_url"),
        post_url=read_value(section, "post_url", DEFAULT_POST_URL, str, "solr.post_url"),
        timeout=float(timeout) if timeout is not None else None,
        user_agent=read_value(section, "user_agent", DEFAULT_USER_AGENT, str, "solr.user_agent"),
    )
    if config.timeout is not None and config.timeout <= 0:
        raise ValueError("solr.timeout must be positive or null")
    # The builder appends its own ``?``; a second one would corrupt GET urls.
    if "?" in config.get_url or "?" in config.post_url:
        raise ValueError("solr.get_url and solr.post_url must not contain a query string")
    if not config.user_agent.strip():
        raise ValueError("solr.user_agent must not be empty")
    return config
