# tests/core/engine/test_planner_compose.py
"""
Testes do planner: composição direta de descritores e emissão de traces.
"""

import pytest

from fluent_flows.core.engine.planner import compose, emit_trace, resolve_step
from fluent_flows.core.exceptions import LoggerNotConfiguredError, StepResolutionError
from fluent_flows.core.pipeline.registry import StepRegistry
from fluent_flows.core.pipeline.types import describe_action


def test_compose_without_steps_is_identity():
    pipeline = compose([], resolver=StepRegistry())
    assert pipeline("same") == "same"


def test_compose_folds_right_to_left_but_runs_in_insertion_order():
    order = []

    def recorder(label):
        def step(payload, next_):
            order.append(label)
            return next_(payload + label)
        return step

    steps = [describe_action(recorder(label)) for label in ("a", "b", "c")]
    pipeline = compose(steps, resolver=StepRegistry())

    assert pipeline("") == "abc"
    assert order == ["a", "b", "c"]


def test_compose_does_not_consume_descriptor_list():
    steps = [describe_action(lambda p: p + 1)]
    compose(steps, resolver=StepRegistry())
    assert len(steps) == 1


def test_emit_trace_without_logger_fails_loudly():
    with pytest.raises(LoggerNotConfiguredError) as info:
        emit_trace(None, "before closure", {"payload": 1})

    assert info.value.details == {"trace_message": "before closure"}


def test_emit_trace_uses_log_method(run_ctx):
    emit_trace(run_ctx, "after closure", {"result": 2})
    assert run_ctx.events[-1]["message"] == "after closure"
    assert run_ctx.events[-1]["result"] == 2


def test_resolve_step_wraps_resolution_error():
    with pytest.raises(StepResolutionError) as info:
        resolve_step(StepRegistry(), "nope")

    assert info.value.to_payload().type == "STEP_RESOLUTION_FAILED"
