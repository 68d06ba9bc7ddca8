# src/fluent_flows/core/config/__init__.py
"""
Camada de configuração das flows.

Responsabilidades do pacote:
    - Carregamento de YAML/JSON (defaults + overrides locais)
    - Sobreposição das seções `flow` e `bindings`
    - Validação das seções e visão tipada (`FlowConfig`)

Limites explícitos:
    - Não define flows nem steps
    - Não executa pipelines
"""

from .errors import (
    ConfigError,
    DefaultsNotFoundError,
    InvalidConfigRootTypeError,
    InvalidConfigSectionError,
    UnsupportedConfigFormatError,
)
from .loader import FlowConfig, load_config, overlay_config, validate_sections

__all__ = [
    "ConfigError",
    "DefaultsNotFoundError",
    "FlowConfig",
    "InvalidConfigRootTypeError",
    "InvalidConfigSectionError",
    "UnsupportedConfigFormatError",
    "load_config",
    "overlay_config",
    "validate_sections",
]
