"""Built-in configuration defaults — lives in L4, not domain."""

from __future__ import annotations

from city_brief.l3_interface_adapters.gateways.ollama_llm_client import DEFAULT_HOST

APP_CONFIG_DEFAULTS: dict = {
    'inference': {
        'model': 'gemma:2b',
        'host': DEFAULT_HOST,
    },
    'parsing': {
        'strict': False,
    },
}
