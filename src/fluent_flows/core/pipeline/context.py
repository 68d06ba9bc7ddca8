# src/fluent_flows/core/pipeline/context.py
"""
Contexto de trace de uma execução de flow.

Este módulo define o `RunContext`, o logger estruturado padrão aceito
por `Flow.debug`. Cada chamada a `log` gera um evento em memória,
com identidade da execução, nível, mensagem e o contexto fornecido.

Invariantes:
    - Eventos sempre incluem `run_id`, `level`, `message` e `timestamp`
    - Eventos são mantidos na ordem de emissão

Limites explícitos:
    - Não executa steps
    - Não persiste eventos automaticamente
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Optional


@dataclass
class RunContext:
    """
    Logger estruturado de uma execução de flow.

    Compatível com o contrato `FlowLogger`: `log(message, context)`.
    Chaves do contexto são incorporadas ao evento, de modo que o trace
    `before <step>` expõe `event["payload"]` e `after <step>` expõe
    `event["result"]`.
    """
    run_id: str
    created_at: datetime
    meta: Dict[str, Any] = field(default_factory=dict)

    events: List[Dict[str, Any]] = field(default_factory=list, init=False)

    @classmethod
    def new(cls, **meta: Any) -> "RunContext":
        return cls(
            run_id=uuid.uuid4().hex,
            created_at=datetime.now(timezone.utc),
            meta=dict(meta),
        )

    def log(
        self,
        message: str,
        context: Optional[Mapping[str, Any]] = None,
        *,
        level: str = "DEBUG",
    ) -> None:
        event = {
            "run_id": self.run_id,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(context or {})
        self.events.append(event)

    def messages(self) -> List[str]:
        return [event["message"] for event in self.events]
