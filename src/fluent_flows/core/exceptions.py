
"""
fluent-flows — Canonical Exceptions (v1)

Este módulo define as exceções tipadas levantadas pelo engine de flows.

Objetivo:
- Permitir que registry e engine levantem exceções semânticas tipadas
- Facilitar o mapeamento determinístico para FlowErrorPayload
- Evitar ValueError/RuntimeError genéricos nos pontos de resolução

Regras:
- Exceções carregam apenas dados estruturados (serializáveis) em `details`.
- A causa original é sempre encadeada via `raise ... from`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, Optional

from .errors import (
    FlowErrorPayload,
    INVALID_STEP,
    LOGGER_NOT_CONFIGURED,
    RESOLUTION_FAILED,
    STEP_RESOLUTION_FAILED,
    step_execution_error,
)


@dataclass(eq=False)
class FlowException(Exception):
    """Base class para exceções internas das flows.

    Importante:
    - Sempre carregar dados estruturados em `details`
    - Não embedar stack trace em payloads de erro
    - Mensagem deve ser curta e humana
    """

    code: ClassVar[str] = "FLOW_ERROR"

    message: str
    details: Dict[str, Any] = field(default_factory=dict)
    hint: Optional[str] = None

    def __str__(self) -> str:
        return self.message

    @classmethod
    def from_payload(cls, payload: FlowErrorPayload) -> "FlowException":
        return cls(
            message=payload.message,
            details=dict(payload.details),
            hint=payload.hint,
        )

    def to_payload(self) -> FlowErrorPayload:
        return FlowErrorPayload(
            type=self.code,
            message=self.message,
            details=dict(self.details),
            hint=self.hint,
        )


# ---------------------------------------------------------------------------
# Resolução
# ---------------------------------------------------------------------------

@dataclass(eq=False)
class ResolutionError(FlowException):
    """O resolver não conseguiu produzir o objeto para um identificador."""

    code: ClassVar[str] = RESOLUTION_FAILED


@dataclass(eq=False)
class StepResolutionError(FlowException):
    """Um step ou condition não pôde ser resolvido durante `execute`."""

    code: ClassVar[str] = STEP_RESOLUTION_FAILED


@dataclass(eq=False)
class InvalidStepError(FlowException):
    """O objeto resolvido não satisfaz o contrato de Step ou Condition."""

    code: ClassVar[str] = INVALID_STEP


# ---------------------------------------------------------------------------
# Observabilidade
# ---------------------------------------------------------------------------

@dataclass(eq=False)
class LoggerNotConfiguredError(FlowException):
    """Emissão de trace solicitada sem logger anexado."""

    code: ClassVar[str] = LOGGER_NOT_CONFIGURED


def describe_exception(exc: BaseException) -> FlowErrorPayload:
    """Converte exceções em FlowErrorPayload (serializável, acionável).

    Regras:
    - FlowException: já vem com message/details/hint.
    - Outras exceções: encapsular como STEP_EXECUTION_ERROR sem expor stack trace.
    - Quando houver `__cause__`, classe e mensagem da causa direta entram em `details`.
    """
    if isinstance(exc, FlowException):
        payload = exc.to_payload()
    else:
        payload = step_execution_error(
            exc_type=exc.__class__.__name__,
            exc_message=str(exc),
        )

    cause = exc.__cause__
    if cause is None:
        return payload

    details = dict(payload.details)
    details["cause"] = {
        "exception_class": cause.__class__.__name__,
        "message": str(cause),
    }
    return FlowErrorPayload(
        type=payload.type,
        message=payload.message,
        details=details,
        hint=payload.hint,
    )
