# src/fluent_flows/core/pipeline/types.py
"""
Tipos canônicos da composição de flows.

Este módulo define o descritor de step, a variante etiquetada que a Flow
acumula a cada chamada de builder e que o planner consome para montar o
pipeline.

Componentes principais:
    - StepKind       → enum de variantes de descritor
    - StepDescriptor → descritor imutável de um step
    - describe_action → classificação do argumento de `run`/`chain`

Invariantes:
    - Um descritor nunca é alterado após criado
    - Identificadores não são resolvidos na criação do descritor

Limites explícitos:
    - Não executa steps
    - Não resolve identificadores
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional, Tuple, Type


class StepKind(str, Enum):
    """
    Variantes de descritor de step.

    Tipos definidos:
        - TRANSFORM: função `(payload) -> payload'`, sempre continua
        - CLOSURE: função `(payload, next_) -> result`
        - STEP: objeto já construído que expõe `handle(payload, next_)`
        - RESOLVABLE: identificador resolvido a cada execução
        - BRANCH: condition por identificador + callback de transformação
        - GUARD: condition inline + step resolvível (`run_if`)
        - CATCH: fronteira de falha sobre o restante da cadeia

    Invariantes:
        - Todo descritor possui exatamente um `kind`
        - O valor textual do enum é o marcador usado nos traces
    """
    TRANSFORM = "transform"
    CLOSURE = "closure"
    STEP = "step"
    RESOLVABLE = "resolvable"
    BRANCH = "branch"
    GUARD = "guard"
    CATCH = "catch"


def identifier_name(identifier: Any) -> str:
    """Nome legível de um identificador (strings inalteradas, classes por qualname)."""
    if isinstance(identifier, str):
        return identifier
    if isinstance(identifier, type):
        return f"{identifier.__module__}.{identifier.__qualname__}"
    return repr(identifier)


@dataclass(frozen=True)
class StepDescriptor:
    """
    Descritor imutável de um step da flow.

    Campos:
        - kind: variante do descritor
        - action: callable, objeto Step ou identificador (conforme `kind`)
        - condition: identificador (BRANCH) ou callable inline (GUARD)
        - callback: transformação do BRANCH ou handler do CATCH
        - exceptions: tipos interceptados pelo CATCH

    Invariantes:
        - `name` é o identificador para RESOLVABLE e o marcador do `kind`
          para as demais variantes
    """
    kind: StepKind
    action: Any = None
    condition: Any = None
    callback: Optional[Callable[..., Any]] = None
    exceptions: Tuple[Type[BaseException], ...] = (Exception,)

    @property
    def name(self) -> str:
        if self.kind is StepKind.RESOLVABLE:
            return identifier_name(self.action)
        return self.kind.value


def _accepts_single_argument(func: Callable[..., Any]) -> bool:
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        return False

    positional = [
        p for p in signature.parameters.values()
        if p.kind in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)
    ]
    if any(p.kind is inspect.Parameter.VAR_POSITIONAL for p in signature.parameters.values()):
        return False

    # parâmetros com default não recebem `next_`
    required = [p for p in positional if p.default is inspect.Parameter.empty]
    if required:
        return len(required) == 1
    return len(positional) == 1


def describe_action(action: Any) -> StepDescriptor:
    """
    Classifica o argumento de `Flow.run`/`Flow.chain` em um descritor.

    Regras:
        - `str` ou classe → RESOLVABLE (resolução adiada para `execute`)
        - objeto com `handle` → STEP
        - callable com um único argumento posicional obrigatório → TRANSFORM
        - demais callables → CLOSURE

    Raises:
        TypeError: Se `action` não for identificador, Step nem callable.
    """
    if isinstance(action, (str, type)):
        return StepDescriptor(kind=StepKind.RESOLVABLE, action=action)

    if callable(getattr(action, "handle", None)):
        return StepDescriptor(kind=StepKind.STEP, action=action)

    if callable(action):
        if _accepts_single_argument(action):
            return StepDescriptor(kind=StepKind.TRANSFORM, action=action)
        return StepDescriptor(kind=StepKind.CLOSURE, action=action)

    raise TypeError(
        f"step action must be an identifier, a Step or a callable, got {type(action).__name__}"
    )
