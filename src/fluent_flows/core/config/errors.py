# src/fluent_flows/core/config/errors.py
"""
Exceções da camada de configuração das flows.

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - Nenhuma exceção representa falha de execução de step
"""


class ConfigError(Exception):
    """
    Exceção base para erros de carregamento e resolução de configuração.

    Limites explícitos:
        - Não representa falha de resolução de step
        - Não representa falha de execução da flow
    """


class DefaultsNotFoundError(ConfigError):
    """O arquivo de defaults não existe no caminho informado."""


class UnsupportedConfigFormatError(ConfigError):
    """
    Extensão de arquivo não suportada pelo loader.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)
    """


class InvalidConfigRootTypeError(ConfigError):
    """O conteúdo raiz do arquivo não é um mapa (`dict`)."""


class InvalidConfigSectionError(ConfigError):
    """
    Uma seção reconhecida possui tipo incompatível.

    Seções verificadas:
        - flow     → dict
        - bindings → dict de identificador (str) para caminho (str)
    """

