"""Gateway: YAML configuration loader — implements ConfigLoader port."""

from __future__ import annotations

import copy
import logging
from pathlib import Path

import yaml

from city_brief.l1_entities.config import AppConfig
from city_brief.l3_interface_adapters.gateways import paths

log = logging.getLogger('cb.config')


class YamlConfigLoader:
    """Builds AppConfig from built-in defaults, an optional YAML file and CLI overrides.

    Precedence, lowest first: *defaults*, the file, *overrides*. With no
    explicit path the first existing entry of ``paths.DEFAULT_CONFIG_PATHS``
    is used, and a missing default file just means "defaults only".
    """

    def __init__(self, defaults: dict | None = None) -> None:
        self._defaults = defaults or {}

    def load(
        self,
        config_path: str | None = None,
        overrides: dict | None = None,
    ) -> AppConfig:
        merged = copy.deepcopy(self._defaults)
        source = _resolve_config_path(config_path)
        if source is not None:
            log.info('Reading config from %s', source)
            deep_merge(merged, _read_yaml_mapping(source))
        deep_merge(merged, overrides or {})
        return AppConfig.model_validate(merged)


def _resolve_config_path(config_path: str | None) -> Path | None:
    if config_path is not None:
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(f'Config file not found: {path}')
        return path
    return next((p for p in paths.DEFAULT_CONFIG_PATHS if p.exists()), None)


def _read_yaml_mapping(path: Path) -> dict:
    data = yaml.safe_load(path.read_text(encoding='utf-8'))
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f'Config file must contain a mapping at the top level: {path}')
    return data


def deep_merge(base: dict, override: dict) -> dict:
    """Recursively merge *override* into *base* (mutates base)."""
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            deep_merge(base[key], value)
        else:
            base[key] = value
    return base
