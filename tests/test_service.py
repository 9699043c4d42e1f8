"""
Tool Service Tests
------------------
Tool-call parsing and dispatch by name.
"""

from types import SimpleNamespace

import pytest

from toolrunner import ToolCall, ToolExecutor, ToolRegistry, ToolService, ToolStatus
from toolrunner import defaults


@pytest.fixture
def loaded_service(service, echo_tool, failing_tool):
    service.register_tool(echo_tool, category="general", tags=["test"])
    service.register_tool(failing_tool)
    return service


class TestParseToolCalls:
    """Tests for parse_tool_calls."""

    def test_parses_dict_message(self, service):
        message = {"tool_calls": [{"id": "call_1", "name": "echo", "args": {"text": "hi"}}]}

        calls = service.parse_tool_calls(message)

        assert calls == [ToolCall(id="call_1", name="echo", args={"text": "hi"})]

    def test_parses_object_message(self, service):
        message = SimpleNamespace(tool_calls=[SimpleNamespace(id="c", name="echo", args={"text": "x"})])

        calls = service.parse_tool_calls(message)

        assert calls[0].name == "echo"
        assert calls[0].args == {"text": "x"}

    def test_missing_id_is_generated(self, service):
        calls = service.parse_tool_calls({"tool_calls": [{"name": "echo"}]})

        assert calls[0].id.startswith("call_")
        assert calls[0].args == {}

    def test_message_without_calls(self, service):
        assert service.parse_tool_calls({}) == []
        assert service.parse_tool_calls({"tool_calls": None}) == []

    def test_string_args_decoded(self, service):
        calls = service.parse_tool_calls({"tool_calls": [{"name": "echo", "args": '{"text": "a"}'}]})

        assert calls[0].args == {"text": "a"}

    def test_malformed_calls_left_out(self, service):
        message = {"tool_calls": [
            {"id": "c1", "args": {}},
            {"name": "echo", "args": "not json"},
            {"name": "echo", "args": {"text": "ok"}},
        ]}

        calls = service.parse_tool_calls(message)

        assert [c.args for c in calls] == [{"text": "ok"}]


class TestExecuteToolCalls:
    """Tests for dispatching tool calls."""

    @pytest.mark.asyncio
    async def test_execute_known_tool(self, loaded_service):
        result = await loaded_service.execute_tool_call(ToolCall(name="echo", args={"text": "hi"}))

        assert result.success
        assert result.result == "hi"

    @pytest.mark.asyncio
    async def test_unknown_tool_is_not_found(self, loaded_service):
        result = await loaded_service.execute_tool_call(ToolCall(name="ghost", args={"a": 1}))

        assert not result.success
        assert result.status == ToolStatus.NOT_FOUND
        assert result.error == "Tool ghost not found"
        assert result.execution_time_ms == 0
        assert result.args == {"a": 1}
        assert loaded_service.get_execution_history() == []

    @pytest.mark.asyncio
    async def test_execute_message_sequentially(self, loaded_service):
        message = {"tool_calls": [
            {"name": "echo", "args": {"text": "a"}},
            {"name": "failing_tool", "args": {}},
            {"name": "ghost", "args": {}},
        ]}

        results = await loaded_service.execute_tool_calls(message)

        assert [r.success for r in results] == [True, False, False]
        assert results[2].status == ToolStatus.NOT_FOUND

    @pytest.mark.asyncio
    async def test_execute_message_in_parallel(self, loaded_service):
        message = {"tool_calls": [
            {"name": "echo", "args": {"text": "a"}},
            {"name": "echo", "args": {"text": "b"}},
        ]}

        results = await loaded_service.execute_tool_calls_parallel(message)

        assert [r.result for r in results] == ["a", "b"]

    @pytest.mark.asyncio
    async def test_nameless_call_does_not_abort_message(self, loaded_service):
        message = {"tool_calls": [
            {"name": "echo", "args": {"text": "a"}},
            {"id": "c2", "args": {}},
        ]}

        results = await loaded_service.execute_tool_calls(message)

        assert len(results) == 2
        assert results[0].result == "a"
        assert not results[1].success
        assert results[1].status == ToolStatus.NOT_FOUND
        assert results[1].error == "Tool call has no name"

    @pytest.mark.asyncio
    async def test_bad_args_become_invalid_args_results(self, loaded_service):
        message = {"tool_calls": [
            {"name": "echo", "args": "{broken"},
            {"name": "echo", "args": ["a"]},
            {"name": "echo", "args": '{"text": "b"}'},
        ]}

        results = await loaded_service.execute_tool_calls_parallel(message)

        assert [r.status for r in results] == [
            ToolStatus.INVALID_ARGS,
            ToolStatus.INVALID_ARGS,
            ToolStatus.SUCCESS,
        ]
        assert "not valid JSON" in results[0].error
        assert "must be an object" in results[1].error
        assert results[2].result == "b"
        assert len(loaded_service.get_execution_history()) == 1

    @pytest.mark.asyncio
    async def test_options_forwarded(self, loaded_service):
        await loaded_service.execute_tool_call(
            ToolCall(name="failing_tool"), options={"retries": 1}
        )

        assert len(loaded_service.get_execution_history()) == 2


class TestServicePassthroughs:
    """Registry and history helpers on the service."""

    def test_registry_helpers(self, loaded_service):
        assert loaded_service.get_tool_count() == 2
        assert loaded_service.has_tool("echo")
        assert [t.name for t in loaded_service.get_tools_by_tag("test")] == ["echo"]
        assert [t.name for t in loaded_service.search_tools("fails")] == ["failing_tool"]
        assert loaded_service.validate_tool_args("echo", {"text": "x"}).valid
        assert loaded_service.unregister_tool("echo")
        assert not loaded_service.has_tool("echo")

    @pytest.mark.asyncio
    async def test_stats_and_history(self, loaded_service):
        for text in ("a", "b", "c"):
            await loaded_service.execute_tool_call(ToolCall(name="echo", args={"text": text}))
        await loaded_service.execute_tool_call(ToolCall(name="failing_tool"))

        stats = loaded_service.get_execution_stats()

        assert stats.total_executions == 4
        assert stats.success_count == 3
        assert stats.failure_count == 1
        assert stats.by_tool["echo"].count == 3
        assert stats.by_tool["echo"].success_rate == 1.0
        assert stats.by_tool["failing_tool"].success_rate == 0.0

        loaded_service.clear_execution_history()
        assert loaded_service.get_execution_stats().total_executions == 0

    def test_injected_components(self):
        registry, executor = ToolRegistry(), ToolExecutor(max_history_size=5)

        service = ToolService(registry=registry, executor=executor)

        assert service.registry is registry
        assert service.executor is executor


class TestDefaults:
    """Process-wide default instances."""

    @pytest.mark.asyncio
    async def test_default_executor_records_history(self, echo_tool):
        defaults.default_executor.clear_history()

        result = await defaults.execute_tool(echo_tool, {"text": "hi"})

        assert result.success
        assert defaults.default_executor.get_history()[-1] is result
        defaults.default_executor.clear_history()

    @pytest.mark.asyncio
    async def test_default_service_dispatch(self, echo_tool):
        defaults.register_tool(echo_tool)
        try:
            results = await defaults.execute_tool_calls(
                {"tool_calls": [{"name": "echo", "args": {"text": "x"}}]}
            )
        finally:
            defaults.default_tool_service.unregister_tool("echo")
            defaults.default_tool_service.clear_execution_history()

        assert results[0].result == "x"
