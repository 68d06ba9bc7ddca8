# src/fluent_flows/core/pipeline/step.py
"""
Contratos canônicos de Step, Condition, Workflow, Resolver e logger.

Um Step é a menor unidade executável de uma flow: recebe o payload
corrente e a continuação (`next_`), e decide se transforma o payload,
interrompe a cadeia ou delega ao restante do pipeline.

Princípios fundamentais:
    - Steps não conhecem a Flow nem o planner
    - A continuação é o único caminho até os steps seguintes
    - Conformidade é garantida por duck typing (@runtime_checkable)

Invariantes:
    - Um step chama `next_` zero ou uma vez
    - O payload é tratado como entrada imutável

Limites explícitos:
    - Não contém lógica de composição
    - Não define políticas de retry ou tratamento de exceções
"""

from __future__ import annotations

from typing import Any, Callable, Mapping, Protocol, runtime_checkable

Next = Callable[[Any], Any]


@runtime_checkable
class Step(Protocol):
    """
    Contrato canônico de um Step.

    O retorno de `handle` torna-se o resultado daquele ponto da cadeia:
    normalmente `next_(payload')`, ou um valor próprio para interromper
    o restante do pipeline.
    """

    def handle(self, payload: Any, next_: Next) -> Any:
        """Processa o payload e, opcionalmente, delega ao próximo step."""
        ...


@runtime_checkable
class Condition(Protocol):
    """Predicado puro sobre o payload, usado por `branch` e `run_if`."""

    def __call__(self, payload: Any) -> bool:
        ...


@runtime_checkable
class Workflow(Protocol):
    """
    Workflow reutilizável: uma classe que monta e executa a própria flow.

    `run` é tipicamente um classmethod que delega a `Flow.execute`.

    Atenção:
        - `isinstance` só verifica o nome do membro: a própria `Flow`
          satisfaz este protocolo por expor `run(action)`, que anexa um
          step em vez de executar. Use `engine.flow.is_workflow` para
          distinguir.
    """

    def run(self, payload: Any) -> Any:
        ...


@runtime_checkable
class Resolver(Protocol):
    """
    Capacidade de resolver um identificador em um Step ou Condition.

    Qualquer exceção levantada por `resolve` chega ao chamador de
    `Flow.execute` como `StepResolutionError`, com a falha como causa.
    """

    def resolve(self, identifier: Any) -> Any:
        ...


@runtime_checkable
class FlowLogger(Protocol):
    """Logger estruturado aceito por `Flow.debug`."""

    def log(self, message: str, context: Mapping[str, Any]) -> None:
        ...
