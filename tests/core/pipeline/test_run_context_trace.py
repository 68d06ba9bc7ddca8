# tests/core/pipeline/test_run_context_trace.py
"""
Testes de logging estruturado no RunContext.
"""

from fluent_flows.core.pipeline.context import RunContext


def test_structured_log_event(run_ctx):
    run_ctx.log("before append_foo", {"payload": "bar"})

    ev = run_ctx.events[-1]
    assert ev["run_id"] == "run-test-001"
    assert ev["level"] == "DEBUG"
    assert ev["message"] == "before append_foo"
    assert ev["payload"] == "bar"
    assert "timestamp" in ev


def test_log_level_and_missing_context(run_ctx):
    run_ctx.log("hello", level="INFO")
    assert run_ctx.events[-1]["level"] == "INFO"
    assert run_ctx.messages() == ["hello"]


def test_new_context_has_unique_identity():
    a = RunContext.new(source="test")
    b = RunContext.new()

    assert a.run_id != b.run_id
    assert a.meta == {"source": "test"}
    assert a.created_at.tzinfo is not None
    assert a.events == []
