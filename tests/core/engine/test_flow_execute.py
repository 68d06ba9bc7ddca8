# tests/core/engine/test_flow_execute.py
"""
Testes de composição e execução da Flow.

Os testes asseguram que:
- uma flow vazia devolve o payload (identidade)
- steps executam na ordem de inserção
- closures, funções de um argumento e objetos Step são aceitos
- um step que não chama `next_` interrompe a cadeia
- falhas sem `catch` chegam ao chamador inalteradas
- `execute` é repetível e não muta a lista de steps
- identificadores são resolvidos a cada execução

Invariantes:
    - A ordem observável é a ordem de inserção
    - A resolução nunca ocorre na montagem da flow
"""

import pytest

try:
    from fluent_flows.core.engine.flow import Flow
    from fluent_flows.core.exceptions import StepResolutionError, ResolutionError
    from tests.fixtures.steps import doubles
except Exception as e:  # noqa: BLE001
    Flow = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing Flow engine. Implement:"
            "- src/fluent_flows/core/engine/flow.py (Flow)"
            f"Import error: {_IMPORT_ERR}"
        )


@pytest.mark.parametrize("payload", ["initial", 42, None, {"data": "test"}, [1, 2]])
def test_pipeline_without_steps_returns_payload(payload):
    _require_imports()
    assert Flow.start().execute(payload) == payload


def test_multiple_steps_are_executed_in_order(registry):
    """
    Dois steps que anexam " foo" produzem "bar foo foo"; steps distintos
    revelam a ordem de inserção.
    """
    _require_imports()
    flow = Flow.start(resolver=registry).run("append_foo").run("append_foo")
    assert flow.execute("bar") == "bar foo foo"

    mixed = Flow.start(resolver=registry).run("append_bar").run("append_foo")
    assert mixed.execute("x") == "x bar foo"


def test_chain_method_appends_foo_once(registry):
    _require_imports()
    flow = Flow.start(resolver=registry).chain("append_foo")
    assert flow.execute("hello") == "hello foo"


def test_closure_step_is_executed():
    _require_imports()
    flow = Flow.start().run(lambda payload, next_: next_(payload + " closure"))
    assert flow.execute("test") == "test closure"


def test_single_argument_function_transforms_and_continues():
    _require_imports()
    flow = Flow.start().run(str.upper).run(lambda payload: payload + "!")
    assert flow.execute("hey") == "HEY!"


def test_function_with_defaulted_second_parameter_is_a_transform():
    _require_imports()
    flow = Flow.start().run(lambda p, sep=" ": p + sep + "x").run(lambda p: p + "!")
    assert flow.execute("a") == "a x!"


def test_injected_resolver_is_used_for_identifiers():
    _require_imports()
    resolver = doubles.DictResolver({"append_foo": doubles.AppendFoo})
    flow = Flow.start(resolver=resolver).run("append_foo").run("append_foo")
    assert flow.execute("x") == "x foo foo"


def test_injected_resolver_failure_becomes_resolution_error():
    _require_imports()
    flow = Flow.start(resolver=doubles.DictResolver({})).run("missing")

    with pytest.raises(StepResolutionError) as info:
        flow.execute("x")

    assert info.value.details["identifier"] == "missing"
    assert isinstance(info.value.__cause__, KeyError)


def test_blank_identifier_is_accepted_until_execution():
    _require_imports()
    flow = Flow.start().run("  ")
    assert len(flow) == 1

    with pytest.raises(StepResolutionError) as info:
        flow.execute("x")

    assert isinstance(info.value.__cause__, ResolutionError)


def test_step_instance_and_class_identifier_are_accepted():
    _require_imports()
    flow = Flow.start().run(doubles.AppendFoo()).chain(doubles.AppendBar)
    assert flow.execute("x") == "x foo bar"


def test_step_without_next_short_circuits(registry):
    _require_imports()
    flow = (
        Flow.start(resolver=registry)
        .run("append_foo")
        .run("stop_here")
        .run("append_bar")
    )
    assert flow.execute("x") == "x foo stopped"


def test_pipeline_raises_exception_when_step_fails(registry):
    """
    Uma falha sem `catch` intermediário propaga ao chamador de `execute`
    com o mesmo tipo e mensagem.
    """
    _require_imports()
    flow = Flow.start(resolver=registry).run("append_foo").run("exception_step")
    with pytest.raises(RuntimeError, match="Step failed"):
        flow.execute("fail")


def test_unknown_identifier_fails_only_at_execution():
    _require_imports()
    flow = Flow.start().run("missing.step")
    assert len(flow) == 1

    with pytest.raises(StepResolutionError) as info:
        flow.execute("payload")

    assert info.value.details["identifier"] == "missing.step"
    assert isinstance(info.value.__cause__, ResolutionError)


def test_execute_is_repeatable_and_does_not_mutate_steps(registry):
    _require_imports()
    flow = Flow.start(resolver=registry).run("append_foo").run(lambda p: p + " done")
    before = flow.steps

    first = flow.execute("bar")
    second = flow.execute("bar")

    assert first == second == "bar foo done"
    assert flow.steps == before


def test_identifiers_are_resolved_on_every_execution():
    _require_imports()
    flow = Flow.start().run(doubles.InstanceCounter)

    start = doubles.InstanceCounter.created
    first = flow.execute("run")
    second = flow.execute("run")

    assert first == f"run #{start + 1}"
    assert second == f"run #{start + 2}"


def test_builder_methods_return_same_flow():
    _require_imports()
    flow = Flow.start()
    assert flow.run(lambda p: p) is flow
    assert flow.chain("x") is flow
    assert flow.branch("cond", lambda p: p) is flow
    assert flow.run_if(lambda p: False, "x") is flow
    assert flow.catch(lambda exc, p: p) is flow
    assert len(flow) == 5


def test_run_rejects_non_callable_action():
    _require_imports()
    with pytest.raises(TypeError):
        Flow.start().run(123)
