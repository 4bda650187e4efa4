"""Dependency container — composition root for wiring all layers together."""

from __future__ import annotations

from city_brief.l1_entities.config import AppConfig
from city_brief.l2_use_cases.city_info_use_case import GetCityInfoUseCase
from city_brief.l2_use_cases.ports.config_loader import ConfigLoader
from city_brief.l2_use_cases.ports.llm_client import LLMClient
from city_brief.l3_interface_adapters.gateways.ollama_llm_client import OllamaLLMClient
from city_brief.l3_interface_adapters.gateways.yaml_config_loader import YamlConfigLoader
from city_brief.l4_frameworks_and_drivers.config_defaults import APP_CONFIG_DEFAULTS


class DependencyContainer:
    """Creates and wires all concrete instances. Easy to override for testing."""

    def __init__(self, config: AppConfig, llm_client: LLMClient | None = None) -> None:
        self.config = config
        self.llm_client: LLMClient = llm_client or OllamaLLMClient(host=config.inference.host)
        self.city_info = GetCityInfoUseCase(self.llm_client, strict=config.parsing.strict)

    @staticmethod
    def config_loader() -> ConfigLoader:
        return YamlConfigLoader(defaults=APP_CONFIG_DEFAULTS)
