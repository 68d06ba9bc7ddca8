# src/fluent_flows/core/config/loader.py
"""
Loader de configuração das flows.

A configuração efetiva é resolvida a partir de:
    - um arquivo de defaults (obrigatório)
    - um arquivo local de overrides (opcional, ignorado se ausente)

Exemplo (YAML):
    flow:
      debug: true
    bindings:
      append_foo: "my_app.steps:AppendFoo"
      is_admin: "my_app.conditions:IsAdmin"

Sobreposição do arquivo local:
    - flow     → chave a chave (`debug` local prevalece)
    - bindings → por identificador; identificadores só do defaults persistem
    - demais seções → substituídas pelo valor local

Invariantes:
    - O resultado é sempre um `dict`
    - Overrides locais nunca mutam os defaults

Limites explícitos:
    - Não importa os alvos de `bindings` (feito a cada resolução)
    - Não define flows: apenas resolução e depuração são configuráveis
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml  # PyYAML

from .errors import (
    DefaultsNotFoundError,
    InvalidConfigRootTypeError,
    InvalidConfigSectionError,
    UnsupportedConfigFormatError,
)


def _load_file(path: Path) -> Dict[str, Any]:
    """
    Lê um arquivo YAML ou JSON e valida que a raiz é um dicionário.

    Arquivos vazios são interpretados como dicionários vazios.

    Raises:
        DefaultsNotFoundError: Se o arquivo não existir.
        UnsupportedConfigFormatError: Se a extensão não for suportada.
        InvalidConfigRootTypeError: Se a raiz não for um dicionário.
    """
    if not path.exists():
        raise DefaultsNotFoundError(f"Arquivo de defaults não encontrado: {path}")

    suffix = path.suffix.lower()

    if suffix in {".yaml", ".yml"}:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

    elif suffix == ".json":
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)

    else:
        raise UnsupportedConfigFormatError(f"Formato não suportado: {path.suffix}")

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(
            f"Config root deve ser dict, recebido: {type(data).__name__}"
        )

    return data


def validate_sections(config: Mapping[str, Any]) -> Mapping[str, Any]:
    """
    Valida o tipo das seções reconhecidas (`flow`, `bindings`).

    Raises:
        InvalidConfigSectionError: Se alguma seção tiver tipo incompatível.
    """
    flow_cfg = config.get("flow")
    if flow_cfg is not None:
        if not isinstance(flow_cfg, dict):
            raise InvalidConfigSectionError(
                f"Seção 'flow' deve ser dict, recebido: {type(flow_cfg).__name__}"
            )
        debug = flow_cfg.get("debug")
        if debug is not None and not isinstance(debug, bool):
            raise InvalidConfigSectionError(
                f"'flow.debug' deve ser bool, recebido: {type(debug).__name__}"
            )

    bindings = config.get("bindings")
    if bindings is None:
        return config
    if not isinstance(bindings, dict):
        raise InvalidConfigSectionError(
            f"Seção 'bindings' deve ser dict, recebido: {type(bindings).__name__}"
        )
    for identifier, path in bindings.items():
        if not isinstance(identifier, str) or not isinstance(path, str):
            raise InvalidConfigSectionError(
                f"Binding inválido: {identifier!r} -> {path!r} (esperado str -> str)"
            )

    return config


def overlay_config(defaults: Mapping[str, Any], local: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Aplica o arquivo local sobre os defaults, seção a seção.

    Ambos os lados são validados antes da sobreposição; nenhum é mutado.
    """
    validate_sections(defaults)
    validate_sections(local)

    effective: Dict[str, Any] = dict(defaults)
    for section, value in local.items():
        if section in ("flow", "bindings"):
            effective[section] = {**(defaults.get(section) or {}), **(value or {})}
        else:
            effective[section] = value
    return effective


def load_config(
    *,
    defaults_path: str,
    local_path: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Carrega e resolve a configuração efetiva.

    Args:
        defaults_path (str): Caminho para o arquivo de configuração base.
        local_path (Optional[str]): Caminho opcional para overrides locais.

    Returns:
        Dict[str, Any]: Configuração final resolvida.

    Raises:
        DefaultsNotFoundError: Se o arquivo de defaults não existir.
        UnsupportedConfigFormatError: Se o formato do arquivo não for suportado.
        InvalidConfigRootTypeError: Se o conteúdo não for um dicionário.
        InvalidConfigSectionError: Se `flow` ou `bindings` tiverem tipo inválido.
    """
    effective = _load_file(Path(defaults_path))

    if local_path is not None:
        local_file = Path(local_path)
        if local_file.exists():
            return overlay_config(effective, _load_file(local_file))

    validate_sections(effective)
    return effective


@dataclass(frozen=True)
class FlowConfig:
    """
    Visão tipada das seções consumidas por `Flow.from_config`.

    Campos:
        - debug: liga o trace da flow
        - bindings: identificador → `"pacote.modulo:Atributo"`
    """
    debug: bool = False
    bindings: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, config: Mapping[str, Any]) -> "FlowConfig":
        """
        Raises:
            InvalidConfigSectionError: Se `flow` ou `bindings` tiverem tipo inválido.
        """
        validate_sections(config)
        flow_cfg = config.get("flow") or {}
        return cls(
            debug=bool(flow_cfg.get("debug", False)),
            bindings=dict(config.get("bindings") or {}),
        )
