# Process-wide convenience instances
"""
Default executor and tool service.

Both are created once, at import, and live for the life of the process.
Code that needs isolated history or its own registry should construct a
ToolExecutor / ToolService instead.
"""
from typing import Any, Dict, Iterable, List, Optional

from toolrunner.core import ToolExecutor, ToolService
from toolrunner.core.executor import OptionsLike
from toolrunner.models import ExecutionResult, RegisteredTool

default_executor = ToolExecutor()
default_tool_service = ToolService()


async def execute_tool(
    tool: Any,
    args: Optional[Dict[str, Any]] = None,
    config: Optional[Any] = None,
    options: OptionsLike = None,
) -> ExecutionResult:
    return await default_executor.execute_tool(tool, args, config, options)


async def execute_tools(tools: Iterable[Any], options: OptionsLike = None) -> List[ExecutionResult]:
    return await default_executor.execute_tools(tools, options)


def register_tool(
    tool: Any,
    category: Optional[str] = None,
    tags: Optional[List[str]] = None,
) -> RegisteredTool:
    return default_tool_service.register_tool(tool, category=category, tags=tags)


async def execute_tool_calls(message: Any, config: Optional[Any] = None) -> List[ExecutionResult]:
    return await default_tool_service.execute_tool_calls(message, config)
