"""
fluent-flows — Canonical Error Structures (v1)

Este módulo define o payload canônico de erro das flows. Erros são
artefatos serializáveis que podem ser devolvidos por um handler de
`catch` ou inspecionados pelo chamador de `execute`.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class FlowErrorPayload:
    """
    Payload canônico de erro de uma flow.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados relevantes para diagnóstico
    - hint: ação sugerida ao chamador (onde corrigir)
    """

    type: str
    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro (v1)
# ---------------------------------------------------------------------------

# Resolução
RESOLUTION_FAILED = "RESOLUTION_FAILED"
STEP_RESOLUTION_FAILED = "STEP_RESOLUTION_FAILED"
INVALID_STEP = "INVALID_STEP"

# Observabilidade
LOGGER_NOT_CONFIGURED = "LOGGER_NOT_CONFIGURED"

# Execução
STEP_EXECUTION_ERROR = "STEP_EXECUTION_ERROR"


# ---------------------------------------------------------------------------
# Helpers de fábrica
# ---------------------------------------------------------------------------

def resolution_failed(
    *,
    identifier: str,
    reason: str,
    hint: str = "Registre o identificador no StepRegistry ou corrija o caminho de import do binding.",
) -> FlowErrorPayload:
    return FlowErrorPayload(
        type=RESOLUTION_FAILED,
        message=f"Não foi possível resolver '{identifier}'",
        details={
            "identifier": identifier,
            "reason": reason,
        },
        hint=hint,
    )


def step_resolution_failed(
    *,
    identifier: str,
    role: str = "step",
    hint: str = "Verifique o resolver injetado na Flow e os bindings disponíveis no momento da execução.",
) -> FlowErrorPayload:
    return FlowErrorPayload(
        type=STEP_RESOLUTION_FAILED,
        message=f"Falha ao resolver {role} '{identifier}' durante a execução da flow",
        details={
            "identifier": identifier,
            "role": role,
        },
        hint=hint,
    )


def invalid_step(
    *,
    identifier: str,
    expected: str,
    received: str,
    hint: str = "Ajuste o binding para produzir um objeto compatível com o contrato esperado.",
) -> FlowErrorPayload:
    return FlowErrorPayload(
        type=INVALID_STEP,
        message=f"'{identifier}' não satisfaz o contrato {expected}",
        details={
            "identifier": identifier,
            "expected": expected,
            "received": received,
        },
        hint=hint,
    )


def logger_not_configured(
    *,
    message: str,
    hint: str = "Anexe um logger com Flow.debug(logger) antes de emitir traces.",
) -> FlowErrorPayload:
    return FlowErrorPayload(
        type=LOGGER_NOT_CONFIGURED,
        message="Emissão de trace sem logger configurado",
        details={"trace_message": message},
        hint=hint,
    )


def step_execution_error(
    *,
    exc_type: str,
    exc_message: str,
    hint: str = "Verifique o stacktrace do step que falhou. Nenhum retry é aplicado automaticamente.",
) -> FlowErrorPayload:
    return FlowErrorPayload(
        type=STEP_EXECUTION_ERROR,
        message=exc_message or "Falha inesperada durante a execução da flow",
        details={
            "exception_class": exc_type,
        },
        hint=hint,
    )
