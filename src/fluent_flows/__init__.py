# src/fluent_flows/__init__.py
"""
fluent-flows — builder fluente de pipelines sequenciais.

Uma flow é uma lista ordenada de steps (funções de transformação,
closures com continuação, steps resolvíveis por identificador, branches,
guards e fronteiras de falha) executada contra um payload inicial.

Arquitetura em alto nível:
    - core.pipeline → contratos, descritores, registry e trace
    - core.engine   → builder `Flow` e composição do pipeline
    - core.config   → carregamento de configuração (bindings, debug)

Limites explícitos:
    - Sem execução paralela, retry ou persistência de flows
"""
# src/fluent_flows/__init__.py
from .core.engine.flow import Flow, is_workflow
from .core.exceptions import (
    FlowException,
    InvalidStepError,
    LoggerNotConfiguredError,
    ResolutionError,
    StepResolutionError,
    describe_exception,
)
from .core.pipeline.context import RunContext
from .core.pipeline.registry import DuplicateIdentifierError, StepRegistry
from .core.pipeline.step import Condition, FlowLogger, Resolver, Step, Workflow

__all__ = [
    "Condition",
    "DuplicateIdentifierError",
    "Flow",
    "FlowException",
    "FlowLogger",
    "InvalidStepError",
    "LoggerNotConfiguredError",
    "ResolutionError",
    "Resolver",
    "RunContext",
    "Step",
    "StepRegistry",
    "StepResolutionError",
    "Workflow",
    "describe_exception",
    "is_workflow",
]
