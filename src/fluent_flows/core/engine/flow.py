# src/fluent_flows/core/engine/flow.py
"""
Builder fluente e executor de flows.

Uma `Flow` acumula descritores de step na ordem de inserção e, em
`execute`, delega ao planner a composição do pipeline e o executa
contra o payload inicial.

Exemplo:
    result = (
        Flow.start(resolver=registry)
        .run(lambda payload: payload.strip())
        .branch("is_admin", lambda payload: payload + " (admin)")
        .run_if(lambda payload: bool(payload), "audit")
        .catch(lambda exc, payload: payload)
        .chain("persist")
        .execute("  alice ")
    )

Invariantes:
    - Cada método de builder anexa exatamente um descritor e devolve `self`
    - `execute` não muta a lista de descritores e pode ser repetido
    - Identificadores só são resolvidos durante `execute`
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, List, Mapping, Optional, Tuple, Type

from fluent_flows.core.config.loader import FlowConfig
from fluent_flows.core.pipeline.context import RunContext
from fluent_flows.core.pipeline.registry import StepRegistry
from fluent_flows.core.pipeline.step import Resolver, Workflow
from fluent_flows.core.pipeline.types import StepDescriptor, StepKind, describe_action

from .planner import compose


class Flow:
    """Pipeline sequencial de steps, montado de forma fluente."""

    def __init__(
        self,
        steps: Optional[Iterable[StepDescriptor]] = None,
        *,
        resolver: Optional[Resolver] = None,
        logger: Optional[Any] = None,
    ):
        self._steps: List[StepDescriptor] = list(steps or [])
        self._resolver: Resolver = resolver if resolver is not None else StepRegistry()
        self._logger: Optional[Any] = logger

    @classmethod
    def start(cls, *, resolver: Optional[Resolver] = None, logger: Optional[Any] = None) -> "Flow":
        return cls(resolver=resolver, logger=logger)

    @classmethod
    def from_config(cls, config: Mapping[str, Any], *, logger: Optional[Any] = None) -> "Flow":
        """
        Cria uma flow vazia a partir da configuração resolvida.

        Chaves reconhecidas:
            - bindings: identificador → `"pacote.modulo:Atributo"`
            - flow.debug: quando verdadeiro, anexa `logger` ou um `RunContext`
              novo cujo meta lista os identificadores vinculados

        Raises:
            InvalidConfigSectionError: Se `flow` ou `bindings` tiverem tipo inválido.
        """
        flow_config = FlowConfig.from_mapping(config)
        flow = cls.start(resolver=StepRegistry.from_bindings(flow_config.bindings))

        if flow_config.debug:
            flow.debug(
                logger or RunContext.new(source="config", bindings=sorted(flow_config.bindings))
            )
        return flow

    # -----------------------------
    # Leitura
    # -----------------------------
    @property
    def steps(self) -> Tuple[StepDescriptor, ...]:
        return tuple(self._steps)

    @property
    def resolver(self) -> Resolver:
        return self._resolver

    @property
    def logger(self) -> Optional[Any]:
        return self._logger

    def __len__(self) -> int:
        return len(self._steps)

    # -----------------------------
    # Builder
    # -----------------------------
    def run(self, action: Any) -> "Flow":
        """
        Anexa um step: função `(payload)`, closure `(payload, next_)`,
        objeto Step, ou identificador resolvido durante `execute`.
        """
        self._steps.append(describe_action(action))
        return self

    def chain(self, action: Any) -> "Flow":
        """Alias de `run`."""
        return self.run(action)

    def branch(self, condition: Any, callback: Callable[[Any], Any]) -> "Flow":
        """
        Anexa um step que resolve `condition` e, se verdadeira, substitui o
        payload por `callback(payload)`. A cadeia sempre continua.
        """
        self._steps.append(
            StepDescriptor(kind=StepKind.BRANCH, condition=condition, callback=callback)
        )
        return self

    def run_if(self, condition: Callable[[Any], Any], action: Any) -> "Flow":
        """
        Anexa um step que só resolve e executa `action` quando
        `condition(payload)` é verdadeira; caso contrário, segue adiante.
        """
        self._steps.append(
            StepDescriptor(kind=StepKind.GUARD, condition=condition, action=action)
        )
        return self

    def catch(
        self,
        handler: Callable[[BaseException, Any], Any],
        *,
        exceptions: Tuple[Type[BaseException], ...] = (Exception,),
    ) -> "Flow":
        """
        Anexa uma fronteira de falha: exceções de `exceptions` levantadas
        pelo restante da cadeia são entregues a `handler(exc, payload)`,
        cujo retorno substitui o resultado daquele ponto.
        """
        if isinstance(exceptions, type):
            exceptions = (exceptions,)
        self._steps.append(
            StepDescriptor(kind=StepKind.CATCH, callback=handler, exceptions=tuple(exceptions))
        )
        return self

    def debug(self, logger: Any) -> "Flow":
        self._logger = logger
        return self

    # -----------------------------
    # Execução
    # -----------------------------
    def execute(self, payload: Any) -> Any:
        pipeline = compose(self._steps, resolver=self._resolver, logger=self._logger)
        return pipeline(payload)


def is_workflow(obj: Any) -> bool:
    """
    Indica se `obj` é um Workflow reutilizável.

    Diferente de `isinstance(obj, Workflow)`, exclui a própria `Flow`,
    cujo `run(action)` coincide em nome com `Workflow.run(payload)`.
    """
    return isinstance(obj, Workflow) and not isinstance(obj, Flow)
