"""Public configuration API for SolrBuilder."""

from SolrBuilder.config.app import AppConfig, load_config, parse_config_dict
from SolrBuilder.config.runtime import RuntimeConfig
from SolrBuilder.config.solr import SolrConfig, default_solr_config

__all__ = [
    "AppConfig",
    "RuntimeConfig",
    "SolrConfig",
    "default_solr_config",
    "load_config",
    "parse_config_dict",
]
