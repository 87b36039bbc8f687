"""Layered YAML configuration for SolrBuilder.

``load_config()`` with no arguments returns the built-in defaults. Each path
given is read in order and deep-merged over the previous layers, so a site
file only needs the keys it changes::

    config = load_config(Path("config/default.yml"), Path("config/prod.yml"))
    configure_logging(runtime=config.runtime)
    docs = SolrQuery.from_config(config).query("authtemplate:news").execute()
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import yaml

from SolrBuilder.config.runtime import RuntimeConfig, load_runtime
from SolrBuilder.config.solr import SolrConfig, load_solr


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Root configuration: logging plus Solr endpoint settings."""

    runtime: RuntimeConfig
    solr: SolrConfig


def parse_config_dict(raw: Mapping[str, Any]) -> AppConfig:
    """Build an ``AppConfig`` from an already merged mapping."""
    return AppConfig(runtime=load_runtime(raw), solr=load_solr(raw))


def load_config(*paths: Path) -> AppConfig:
    """Load and merge YAML layers, later paths overriding earlier ones."""
    merged: dict[str, Any] = {}
    for path in paths:
        merged = _merge(merged, _read_yaml(path))
    return parse_config_dict(merged)


def _read_yaml(path: Path) -> dict[str, Any]:
    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(data, Mapping):
        raise ValueError(f"{path}: config root must be a mapping")
    return dict(data)


def _merge(base: Mapping[str, Any], layer: Mapping[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in layer.items():
        current = merged.get(key)
        merged[key] = _merge(current, value) if isinstance(current, Mapping) and isinstance(value, Mapping) else value
    return merged
