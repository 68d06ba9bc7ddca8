# src/fluent_flows/core/pipeline/registry.py
"""
Registro explícito de steps e conditions resolvíveis.

Este módulo define o `StepRegistry`, a implementação padrão do contrato
`Resolver`: associa identificadores (strings ou classes) a factories e
produz uma instância nova a cada resolução.

Responsabilidades do módulo:
    - Validar identificadores e unicidade no momento do binding
    - Preservar a ordem de registro
    - Resolver identificadores sob demanda, sem cache entre execuções
    - Encapsular qualquer falha de resolução em `ResolutionError`

Invariantes:
    - Cada identificador registrado é único
    - Cada chamada a `resolve` invoca a factory novamente
    - Uma classe não registrada é instanciada diretamente

Limites explícitos:
    - Não executa steps
    - Não interage com a Flow nem com o planner
"""

from __future__ import annotations

import importlib
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping

from fluent_flows.core.errors import resolution_failed
from fluent_flows.core.exceptions import ResolutionError

from .types import identifier_name


class DuplicateIdentifierError(ValueError):
    """
    Exceção levantada quando um identificador já possui binding no registry.

    Invariantes:
        - O binding existente permanece intacto após a falha
    """


def _validate_identifier(identifier: Any) -> None:
    if isinstance(identifier, type):
        return
    if not isinstance(identifier, str) or not identifier.strip():
        raise ValueError("identifier must be a non-empty string or a class")


def import_target(path: str) -> Any:
    """
    Importa o objeto apontado por `"pacote.modulo:Atributo"`.

    Raises:
        ValueError: Se o caminho não estiver no formato `modulo:atributo`.
        ImportError: Se o módulo não puder ser importado.
        AttributeError: Se o atributo não existir no módulo.
    """
    module_name, sep, attr_path = path.partition(":")
    if not sep or not module_name or not attr_path:
        raise ValueError(f"binding path must look like 'package.module:Attribute', got '{path}'")

    target: Any = importlib.import_module(module_name)
    for attr in attr_path.split("."):
        target = getattr(target, attr)
    return target


@dataclass
class StepRegistry:
    """
    Registro canônico de steps e conditions resolvíveis por identificador.

    Exemplo:
        registry = StepRegistry()
        registry.bind("append_foo", AppendFoo)
        Flow.start(resolver=registry).run("append_foo").execute("bar")
    """

    _factories: Dict[Any, Callable[[], Any]] = field(default_factory=dict, init=False, repr=False)
    _order: List[Any] = field(default_factory=list, init=False, repr=False)

    @classmethod
    def from_bindings(cls, bindings: Mapping[str, str]) -> "StepRegistry":
        if not isinstance(bindings, Mapping):
            raise ValueError(f"bindings must be a mapping, got {type(bindings).__name__}")

        registry = cls()
        for identifier, path in bindings.items():
            registry.bind_path(identifier, path)
        return registry

    def bind(self, identifier: Any, factory: Callable[[], Any]) -> "StepRegistry":
        _validate_identifier(identifier)
        if not callable(factory):
            raise ValueError(f"factory for '{identifier_name(identifier)}' must be callable")

        if identifier in self._factories:
            raise DuplicateIdentifierError(f"Duplicate identifier: {identifier_name(identifier)}")

        self._factories[identifier] = factory
        self._order.append(identifier)
        return self

    def bind_path(self, identifier: Any, path: str) -> "StepRegistry":
        if not isinstance(path, str) or ":" not in path:
            raise ValueError(
                f"binding path for '{identifier_name(identifier)}' must look like 'package.module:Attribute'"
            )

        # import adiado: o alvo é reimportado a cada resolução
        return self.bind(identifier, lambda: import_target(path)())

    def has(self, identifier: Any) -> bool:
        return identifier in self._factories

    def identifiers(self) -> List[Any]:
        return list(self._order)

    def resolve(self, identifier: Any) -> Any:
        name = identifier_name(identifier)

        factory = self._factories.get(identifier) if _hashable(identifier) else None
        if factory is None:
            if not isinstance(identifier, type):
                raise ResolutionError.from_payload(
                    resolution_failed(identifier=name, reason="no binding registered")
                )
            factory = identifier

        try:
            return factory()
        except Exception as exc:
            raise ResolutionError.from_payload(
                resolution_failed(identifier=name, reason=f"{exc.__class__.__name__}: {exc}")
            ) from exc


def _hashable(value: Any) -> bool:
    try:
        hash(value)
    except TypeError:
        return False
    return True
