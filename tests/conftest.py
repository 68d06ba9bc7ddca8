# tests/conftest.py
"""
Fixtures compartilhados para testes das flows.

Este módulo define fixtures reutilizáveis que fornecem:
- um StepRegistry com os doubles de `tests/fixtures/steps`
- um RunContext determinístico para inspeção de traces
- conteúdos YAML de configuração (defaults + local)

Invariantes:
    - Nenhuma fixture executa uma flow
    - Nenhuma fixture realiza I/O
"""

import pytest
from datetime import datetime, timezone


# =====================================================
# Config fixtures
# =====================================================

@pytest.fixture
def flow_config_defaults_yaml() -> str:
    """
    YAML de configuração padrão (defaults), semelhante a um `flows.defaults.yaml`.

    Returns:
        str: Conteúdo YAML com depuração desligada e dois bindings.
    """
    return """\
flow:
  debug: false
bindings:
  append_foo: "tests.fixtures.steps.doubles:AppendFoo"
  contains_run: "tests.fixtures.steps.doubles:ContainsRun"
"""


@pytest.fixture
def flow_config_local_yaml() -> str:
    """
    YAML de override local: liga a depuração e acrescenta um binding.

    Returns:
        str: Conteúdo YAML representando configuração local de override.
    """
    return """\
flow:
  debug: true
bindings:
  append_bar: "tests.fixtures.steps.doubles:AppendBar"
"""


# =====================================================
# Pipeline fixtures (Registry + RunContext)
# =====================================================

@pytest.fixture
def registry():
    """
    StepRegistry com os doubles registrados por identificador textual.

    O import é feito de forma lazy para que falhas de import apareçam
    no teste, e não na coleta.
    """
    from fluent_flows.core.pipeline.registry import StepRegistry
    from tests.fixtures.steps import doubles

    reg = StepRegistry()
    reg.bind("append_foo", doubles.AppendFoo)
    reg.bind("append_bar", doubles.AppendBar)
    reg.bind("stop_here", doubles.StopHere)
    reg.bind("exception_step", doubles.ExceptionStep)
    reg.bind("contains_run", doubles.ContainsRun)
    reg.bind("is_true", doubles.IsTrue)
    reg.bind("is_false", doubles.IsFalse)
    return reg


@pytest.fixture
def run_ctx():
    """
    RunContext com identidade fixa, usado como logger de trace.

    Returns:
        RunContext: Contexto isolado, sem eventos prévios.
    """
    from fluent_flows.core.pipeline.context import RunContext

    return RunContext(
        run_id="run-test-001",
        created_at=datetime(2026, 1, 16, 0, 0, 0, tzinfo=timezone.utc),
        meta={"source": "pytest"},
    )
