# src/fluent_flows/core/engine/planner.py
"""
Composição dos descritores de uma flow em um pipeline executável.

O planner dobra a lista de descritores da direita para a esquerda: a
continuação terminal é a identidade, e cada descritor, do último ao
primeiro, envolve a continuação construída até ali. O resultado é uma
única função `payload -> result` cuja ordem observável de execução é a
ordem de inserção dos steps.

Invariantes:
    - A lista de descritores nunca é mutada
    - Identificadores são resolvidos a cada execução, nunca em cache
    - Um step que não chama `next_` interrompe o restante da cadeia
    - Falhas de resolução chegam ao chamador como `StepResolutionError`
    - Traces não alteram controle de fluxo nem propagação de falhas

Limites explícitos:
    - Não valida identificadores antes da execução
    - Não aplica retry, timeout ou paralelismo
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, Mapping, Optional

from fluent_flows.core.errors import invalid_step, logger_not_configured, step_resolution_failed
from fluent_flows.core.exceptions import (
    FlowException,
    InvalidStepError,
    LoggerNotConfiguredError,
    ResolutionError,
    StepResolutionError,
)
from fluent_flows.core.pipeline.step import Next, Resolver
from fluent_flows.core.pipeline.types import StepDescriptor, StepKind, identifier_name

Pipeline = Callable[[Any], Any]


def _identity(payload: Any) -> Any:
    return payload


# ---------------------------------------------------------------------------
# Resolução
# ---------------------------------------------------------------------------

def _resolve(resolver: Resolver, identifier: Any, role: str) -> Any:
    """
    Chama `resolver.resolve` e normaliza qualquer falha em `StepResolutionError`.

    Resolvers injetados podem levantar exceções próprias (ex.: `KeyError`);
    apenas exceções das flows que não sejam `ResolutionError` passam intactas.
    """
    try:
        return resolver.resolve(identifier)
    except FlowException as exc:
        if not isinstance(exc, ResolutionError):
            raise
        cause: Exception = exc
    except Exception as exc:  # noqa: BLE001
        cause = exc

    raise StepResolutionError.from_payload(
        step_resolution_failed(identifier=identifier_name(identifier), role=role)
    ) from cause


def resolve_step(resolver: Resolver, identifier: Any) -> Any:
    """
    Resolve um identificador em um objeto que satisfaz o contrato Step.

    Raises:
        StepResolutionError: Se o resolver falhar (causa original encadeada).
        InvalidStepError: Se o objeto resolvido não expuser `handle`.
    """
    name = identifier_name(identifier)
    step = _resolve(resolver, identifier, "step")

    if not callable(getattr(step, "handle", None)):
        raise InvalidStepError.from_payload(
            invalid_step(identifier=name, expected="Step", received=type(step).__name__)
        )
    return step


def resolve_condition(resolver: Resolver, identifier: Any) -> Callable[[Any], Any]:
    """Resolve o identificador de condition de um `branch` em um predicado."""
    name = identifier_name(identifier)
    checker = _resolve(resolver, identifier, "condition")

    if not callable(checker):
        raise InvalidStepError.from_payload(
            invalid_step(identifier=name, expected="Condition", received=type(checker).__name__)
        )
    return checker


# ---------------------------------------------------------------------------
# Comportamento por variante
# ---------------------------------------------------------------------------

def _run_transform(descriptor: StepDescriptor, payload: Any, next_: Next, resolver: Resolver) -> Any:
    return next_(descriptor.action(payload))


def _run_closure(descriptor: StepDescriptor, payload: Any, next_: Next, resolver: Resolver) -> Any:
    return descriptor.action(payload, next_)


def _run_step(descriptor: StepDescriptor, payload: Any, next_: Next, resolver: Resolver) -> Any:
    return descriptor.action.handle(payload, next_)


def _run_resolvable(descriptor: StepDescriptor, payload: Any, next_: Next, resolver: Resolver) -> Any:
    step = resolve_step(resolver, descriptor.action)
    return step.handle(payload, next_)


def _run_branch(descriptor: StepDescriptor, payload: Any, next_: Next, resolver: Resolver) -> Any:
    checker = resolve_condition(resolver, descriptor.condition)
    if checker(payload):
        payload = descriptor.callback(payload)
    return next_(payload)


def _run_guard(descriptor: StepDescriptor, payload: Any, next_: Next, resolver: Resolver) -> Any:
    if not descriptor.condition(payload):
        return next_(payload)
    step = resolve_step(resolver, descriptor.action)
    return step.handle(payload, next_)


def _run_catch(descriptor: StepDescriptor, payload: Any, next_: Next, resolver: Resolver) -> Any:
    try:
        return next_(payload)
    except descriptor.exceptions as exc:
        return descriptor.callback(exc, payload)


_HANDLERS: Dict[StepKind, Callable[[StepDescriptor, Any, Next, Resolver], Any]] = {
    StepKind.TRANSFORM: _run_transform,
    StepKind.CLOSURE: _run_closure,
    StepKind.STEP: _run_step,
    StepKind.RESOLVABLE: _run_resolvable,
    StepKind.BRANCH: _run_branch,
    StepKind.GUARD: _run_guard,
    StepKind.CATCH: _run_catch,
}


# ---------------------------------------------------------------------------
# Traces
# ---------------------------------------------------------------------------

def emit_trace(logger: Any, message: str, context: Mapping[str, Any]) -> None:
    """
    Emite um registro de trace no logger informado.

    Aceita um objeto com `log(message, context)` ou um callable de dois
    argumentos.

    Raises:
        LoggerNotConfiguredError: Se `logger` for None.
    """
    if logger is None:
        raise LoggerNotConfiguredError.from_payload(logger_not_configured(message=message))

    log = getattr(logger, "log", logger)
    log(message, dict(context))


def _layer(descriptor: StepDescriptor, next_: Next, resolver: Resolver, logger: Any) -> Pipeline:
    handler = _HANDLERS[descriptor.kind]

    def layer(payload: Any) -> Any:
        return handler(descriptor, payload, next_, resolver)

    if logger is None:
        return layer

    name = descriptor.name

    def traced(payload: Any) -> Any:
        emit_trace(logger, f"before {name}", {"payload": payload})
        result = layer(payload)
        emit_trace(logger, f"after {name}", {"result": result})
        return result

    return traced


def compose(
    steps: Iterable[StepDescriptor],
    *,
    resolver: Resolver,
    logger: Optional[Any] = None,
) -> Pipeline:
    """
    Monta o pipeline executável a partir dos descritores, do último ao primeiro.

    Args:
        steps (Iterable[StepDescriptor]): Descritores na ordem de inserção.
        resolver (Resolver): Capacidade de resolução usada durante a execução.
        logger (Optional[Any]): Logger de trace; quando None, nenhum trace é emitido.

    Returns:
        Pipeline: Função que recebe o payload inicial e devolve o resultado final.
    """
    pipeline: Pipeline = _identity
    for descriptor in reversed(list(steps)):
        pipeline = _layer(descriptor, pipeline, resolver, logger)
    return pipeline
