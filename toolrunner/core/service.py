# High-level tool management
"""Tool service: registry plus executor, driven by model tool calls"""
from typing import Any, Dict, List, Optional, Union
import asyncio
import json
import logging

from toolrunner.config import ERROR_MESSAGES
from toolrunner.core.executor import OptionsLike, ToolExecutor
from toolrunner.core.registry import ToolRegistry
from toolrunner.models import (
    ExecutionResult,
    ExecutionStatistics,
    RegisteredTool,
    ToolCall,
    ToolNotFoundError,
    ToolStatus,
    ToolValidationError,
)
from toolrunner.safety.validators import ValidationResult
from toolrunner.tools.base import BaseTool

logger = logging.getLogger(__name__)


def _field(item: Any, key: str, default: Any = None) -> Any:
    if isinstance(item, dict):
        return item.get(key, default)
    return getattr(item, key, default)


def _parse_call(raw: Any) -> ToolCall:
    """
    Build a ToolCall from a raw model tool call

    Raises:
        ToolNotFoundError: the call carries no tool name
        ToolValidationError: args are neither a mapping nor a JSON object string
    """
    name = _field(raw, "name")
    args = _field(raw, "args")

    if isinstance(args, str):
        try:
            args = json.loads(args) if args.strip() else {}
        except ValueError as e:
            raise ToolValidationError(
                f"{ERROR_MESSAGES['INVALID_ARGS']}: args are not valid JSON ({e})",
                tool_name=name if isinstance(name, str) else None,
            ) from e

    if not isinstance(name, str) or not name:
        raise ToolNotFoundError(
            "Tool call has no name",
            tool_args=args if isinstance(args, dict) else None,
        )

    if args is None:
        args = {}
    if not isinstance(args, dict):
        raise ToolValidationError(
            f"{ERROR_MESSAGES['INVALID_ARGS']}: args must be an object, got {type(args).__name__}",
            tool_name=name,
        )

    values = {"name": name, "args": args}
    call_id = _field(raw, "id")
    if call_id:
        values["id"] = str(call_id)
    return ToolCall(**values)


class ToolService:
    """
    Manages tools and runs the tool calls a model asks for

    The registry and executor can be injected; otherwise each service owns
    fresh instances.
    """

    def __init__(
        self,
        registry: Optional[ToolRegistry] = None,
        executor: Optional[ToolExecutor] = None,
    ):
        self.registry = registry or ToolRegistry()
        self.executor = executor or ToolExecutor()

    # Registry

    def register_tool(
        self,
        tool: BaseTool,
        category: Optional[str] = None,
        tags: Optional[List[str]] = None,
    ) -> RegisteredTool:
        return self.registry.register(tool, category=category, tags=tags)

    def register_tools(self, tools: List[BaseTool], category: Optional[str] = None):
        self.registry.register_many(tools, category=category)

    def get_tool(self, name: str) -> Optional[RegisteredTool]:
        return self.registry.get(name)

    def get_all_tools(self) -> List[RegisteredTool]:
        return self.registry.list_all()

    def get_tools_by_category(self, category: str) -> List[RegisteredTool]:
        return self.registry.list_by_category(category)

    def get_tools_by_tag(self, tag: str) -> List[RegisteredTool]:
        return self.registry.list_by_tag(tag)

    def search_tools(self, query: str) -> List[RegisteredTool]:
        return self.registry.search(query)

    def has_tool(self, name: str) -> bool:
        return self.registry.has_tool(name)

    def unregister_tool(self, name: str) -> bool:
        return self.registry.unregister(name)

    def clear_tools(self):
        self.registry.clear()

    def get_tool_count(self) -> int:
        return self.registry.get_tool_count()

    def validate_tool_args(self, name: str, args: Any) -> ValidationResult:
        return self.registry.validate_args(name, args)

    def get_tool_schema(self, name: str) -> Optional[Dict[str, Any]]:
        return self.registry.get_schema(name)

    def get_tools_for_binding(self) -> List[BaseTool]:
        return self.registry.get_tools_for_binding()

    def export_tool_definitions(self) -> List[Dict[str, Any]]:
        return self.registry.export_definitions()

    def create_catalog(self) -> str:
        return self.registry.create_catalog()

    # Tool calls

    def parse_tool_calls(self, message: Any) -> List[ToolCall]:
        """
        Extract tool calls from a model message

        The message may be a mapping or an object; either way it exposes
        ``tool_calls`` whose items carry ``name``, ``args`` and optionally ``id``.
        String ``args`` are decoded as JSON. Calls that cannot be parsed are
        logged and left out.
        """
        calls = []
        for item in self._prepare_calls(message):
            if isinstance(item, ToolCall):
                calls.append(item)
        return calls

    def _prepare_calls(self, message: Any) -> List[Union[ToolCall, ExecutionResult]]:
        """Parse every raw call, turning unparseable ones into failed results"""
        prepared: List[Union[ToolCall, ExecutionResult]] = []
        for raw in _field(message, "tool_calls") or []:
            try:
                prepared.append(_parse_call(raw))
            except (ToolNotFoundError, ToolValidationError) as e:
                logger.warning(f"Malformed tool call: {e}")
                status = ToolStatus.NOT_FOUND
                if isinstance(e, ToolValidationError):
                    status = ToolStatus.INVALID_ARGS
                prepared.append(ExecutionResult.failed(
                    tool_name=e.tool_name or "unknown_tool",
                    args=e.tool_args,
                    error=e.message,
                    execution_time_ms=0,
                    status=status,
                ))
        return prepared

    async def _dispatch(
        self,
        item: Union[ToolCall, ExecutionResult],
        config: Optional[Any],
        options: OptionsLike,
    ) -> ExecutionResult:
        if isinstance(item, ExecutionResult):
            return item
        return await self.execute_tool_call(item, config, options)

    async def execute_tool_call(
        self,
        tool_call: ToolCall,
        config: Optional[Any] = None,
        options: OptionsLike = None,
    ) -> ExecutionResult:
        """
        Execute a single tool call by name

        Unknown tools produce a failed result without touching history.
        """
        entry = self.registry.get(tool_call.name)
        if entry is None:
            logger.error(f"Tool not found: {tool_call.name}")
            return ExecutionResult.failed(
                tool_name=tool_call.name,
                args=tool_call.args,
                error=f"Tool {tool_call.name} not found",
                execution_time_ms=0,
                status=ToolStatus.NOT_FOUND,
            )

        return await self.executor.execute_tool(entry.tool, tool_call.args, config, options)

    async def execute_tool_calls(
        self,
        message: Any,
        config: Optional[Any] = None,
        options: OptionsLike = None,
    ) -> List[ExecutionResult]:
        """
        Execute every tool call in a message, one at a time

        Malformed calls yield failed results in their position.
        """
        results = []
        for item in self._prepare_calls(message):
            results.append(await self._dispatch(item, config, options))
        return results

    async def execute_tool_calls_parallel(
        self,
        message: Any,
        config: Optional[Any] = None,
        options: OptionsLike = None,
    ) -> List[ExecutionResult]:
        """Execute every tool call in a message concurrently"""
        prepared = self._prepare_calls(message)
        return list(
            await asyncio.gather(
                *(self._dispatch(item, config, options) for item in prepared)
            )
        )

    # History

    def get_execution_stats(self) -> ExecutionStatistics:
        return self.executor.get_statistics()

    def get_execution_history(self) -> List[ExecutionResult]:
        return self.executor.get_history()

    def clear_execution_history(self):
        self.executor.clear_history()
